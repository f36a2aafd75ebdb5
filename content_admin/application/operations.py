"""Fixed GraphQL operation documents sent to the content endpoint.

Each document is a parameterized request template. Variables:
- collection: String!, relativePath: String! (all document operations)
- includeDocuments: Boolean!, sort: String (collection query)
- params: DocumentMutation! (create / update)
"""

DELETE_DOCUMENT = """
mutation DeleteDocument($collection: String!, $relativePath: String!) {
  deleteDocument(collection: $collection, relativePath: $relativePath) {
    __typename
  }
}
"""

GET_COLLECTION_WITH_DOCUMENTS = """
query GetCollection($collection: String!, $includeDocuments: Boolean!, $sort: String) {
  collection(collection: $collection) {
    name
    label
    format
    templates
    documents(sort: $sort) @include(if: $includeDocuments) {
      totalCount
      edges {
        node {
          ... on Document {
            _sys {
              title
              template
              breadcrumbs
              path
              basename
              relativePath
              filename
              extension
            }
          }
        }
      }
    }
  }
}
"""

GET_DOCUMENT_VALUES = """
query GetDocument($collection: String!, $relativePath: String!) {
  document(collection: $collection, relativePath: $relativePath) {
    ... on Document {
      _values
    }
  }
}
"""

CREATE_DOCUMENT = """
mutation CreateDocument($collection: String!, $relativePath: String!, $params: DocumentMutation!) {
  createDocument(collection: $collection, relativePath: $relativePath, params: $params) {
    __typename
  }
}
"""

UPDATE_DOCUMENT = """
mutation UpdateDocument($collection: String!, $relativePath: String!, $params: DocumentMutation!) {
  updateDocument(collection: $collection, relativePath: $relativePath, params: $params) {
    __typename
  }
}
"""
