"""GraphQL documents used against the GitHub API."""

from __future__ import annotations

GET_ORGANIZATION_PROJECT = """
query getOrganizationProject($projectOwnerName: String!, $projectNumber: Int!) {
  organization(login: $projectOwnerName) {
    projectV2(number: $projectNumber) {
      id
    }
  }
}
"""

GET_USER_PROJECT = """
query getUserProject($projectOwnerName: String!, $projectNumber: Int!) {
  user(login: $projectOwnerName) {
    projectV2(number: $projectNumber) {
      id
    }
  }
}
"""

CREATE_DRAFT_ISSUE = """
mutation createDraftIssue($projectId: ID!, $itemTitle: String!, $itemBody: String!) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $itemTitle, body: $itemBody}) {
    projectItem {
      id
    }
  }
}
"""
