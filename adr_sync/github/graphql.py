"""GraphQL documents for discussions, labels, and categories."""

# Queries
# -------

SEARCH_DISCUSSIONS = """
query SearchDiscussions($searchQuery: String!, $labelsEndCursor: String) {
  search(query: $searchQuery, type: DISCUSSION, first: 1) {
    nodes {
      ... on Discussion {
        id
        body
        closed
        labels(first: 100, after: $labelsEndCursor) {
          nodes {
            id
            name
          }
          pageInfo {
            hasNextPage
            endCursor
          }
        }
      }
    }
  }
}
"""

REPOSITORY_CATEGORIES_AND_LABELS = """
query RepositoryCategoriesAndLabels($owner: String!, $repo: String!, $categoriesEndCursor: String, $labelsEndCursor: String) {
  repository(owner: $owner, name: $repo) {
    id
    discussionCategories(first: 100, after: $categoriesEndCursor) {
      nodes {
        id
        name
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
    labels(first: 100, after: $labelsEndCursor) {
      nodes {
        id
        name
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

REPOSITORY_CATEGORIES = """
query RepositoryCategories($owner: String!, $repo: String!, $categoriesEndCursor: String) {
  repository(owner: $owner, name: $repo) {
    id
    discussionCategories(first: 100, after: $categoriesEndCursor) {
      nodes {
        id
        name
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

REPOSITORY_LABELS = """
query RepositoryLabels($owner: String!, $repo: String!, $labelsEndCursor: String) {
  repository(owner: $owner, name: $repo) {
    id
    labels(first: 100, after: $labelsEndCursor) {
      nodes {
        id
        name
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

# Mutations
# ---------

CREATE_DISCUSSION = """
mutation CreateDiscussion($repositoryId: ID!, $title: String!, $body: String!, $categoryId: ID!) {
  createDiscussion(input: {repositoryId: $repositoryId, title: $title, body: $body, categoryId: $categoryId}) {
    discussion {
      id
    }
  }
}
"""

UPDATE_DISCUSSION = """
mutation UpdateDiscussion($discussionId: ID!, $body: String!) {
  updateDiscussion(input: {discussionId: $discussionId, body: $body}) {
    clientMutationId
  }
}
"""

ADD_DISCUSSION_COMMENT = """
mutation AddDiscussionComment($discussionId: ID!, $body: String!) {
  addDiscussionComment(input: {discussionId: $discussionId, body: $body}) {
    clientMutationId
  }
}
"""

CLOSE_DISCUSSION = """
mutation CloseDiscussion($discussionId: ID!) {
  closeDiscussion(input: {discussionId: $discussionId}) {
    clientMutationId
  }
}
"""

REOPEN_DISCUSSION = """
mutation ReopenDiscussion($discussionId: ID!) {
  reopenDiscussion(input: {discussionId: $discussionId}) {
    clientMutationId
  }
}
"""

ADD_LABEL = """
mutation AddLabel($discussionId: ID!, $labelId: ID!) {
  addLabelsToLabelable(input: {labelableId: $discussionId, labelIds: [$labelId]}) {
    clientMutationId
  }
}
"""

REMOVE_LABEL = """
mutation RemoveLabel($discussionId: ID!, $labelId: ID!) {
  removeLabelsFromLabelable(input: {labelableId: $discussionId, labelIds: [$labelId]}) {
    clientMutationId
  }
}
"""

CREATE_LABEL = """
mutation CreateLabel($repositoryId: ID!, $name: String!, $color: String!, $description: String!) {
  createLabel(input: {repositoryId: $repositoryId, name: $name, color: $color, description: $description}) {
    label {
      id
      name
    }
  }
}
"""
