"""
Named GraphQL operation documents sent to OneGraph.

Every document authenticates through the ``nfToken`` variable via the
``oneGraph(auths: ...)`` root field. Keys of ``OPERATIONS`` are the
operation names passed to ``GraphQLExecutor.execute``.
"""

FETCH_CLI_SESSION = """
query FetchCLISessionQuery($nfToken: String!, $sessionId: String!, $first: Int!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    netlifyCliSession(id: $sessionId) {
      appId
      createdAt
      id
      lastEventAt
      metadata
      name
      netlifyUserId
      events(first: $first) {
        __typename
        createdAt
        id
        sessionId
        ... on OneGraphNetlifyCliSessionTestEvent {
          payload
        }
        ... on OneGraphNetlifyCliSessionGenerateHandlerEvent {
          payload {
            cliSessionId
            operationId
          }
        }
        ... on OneGraphNetlifyCliSessionPersistedLibraryUpdatedEvent {
          payload {
            docId
            schemaId
          }
        }
      }
    }
  }
}
"""

ACK_CLI_SESSION_EVENT = """
mutation AckCLISessionEventMutation($nfToken: String!, $sessionId: String!, $eventIds: [String!]!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    ackNetlifyCliEvents(input: { eventIds: $eventIds, sessionId: $sessionId }) {
      id
    }
  }
}
"""

CREATE_CLI_SESSION = """
mutation CreateCLISessionMutation($nfToken: String!, $appId: String!, $name: String!, $metadata: JSON) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    createNetlifyCliSession(input: { appId: $appId, name: $name, metadata: $metadata }) {
      session {
        id
        appId
        netlifyUserId
        name
        metadata
        createdAt
        lastEventAt
      }
    }
  }
}
"""

UPDATE_CLI_SESSION_METADATA = """
mutation UpdateCLISessionMetadataMutation($nfToken: String!, $sessionId: String!, $metadata: JSON!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    updateNetlifyCliSession(input: { id: $sessionId, metadata: $metadata }) {
      session {
        id
        name
        metadata
        createdAt
        lastEventAt
      }
    }
  }
}
"""

MARK_CLI_SESSION_ACTIVE_HEARTBEAT = """
mutation MarkCLISessionActiveHeartbeat($nfToken: String!, $id: String!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    updateNetlifyCliSession(input: { status: ACTIVE, id: $id }) {
      session {
        id
        status
        createdAt
        updatedAt
      }
    }
  }
}
"""

MARK_CLI_SESSION_INACTIVE = """
mutation MarkCLISessionInactive($nfToken: String!, $id: String!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    updateNetlifyCliSession(input: { status: INACTIVE, id: $id }) {
      session {
        id
        status
        createdAt
        updatedAt
      }
    }
  }
}
"""

FETCH_PERSISTED_QUERY = """
query FetchPersistedQueryQuery($nfToken: String!, $appId: String!, $id: String!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    persistedQuery(appId: $appId, id: $id) {
      id
      query
      allowedOperationNames
      description
      tags
    }
  }
}
"""

CREATE_PERSISTED_QUERY = """
mutation CreatePersistedQueryMutation(
  $nfToken: String!
  $appId: String!
  $query: String!
  $tags: [String!]!
  $description: String!
) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    createPersistedQuery(
      input: { query: $query, appId: $appId, tags: $tags, description: $description }
    ) {
      persistedQuery {
        id
        query
        allowedOperationNames
        description
        tags
      }
    }
  }
}
"""

FETCH_APP_SCHEMA = """
query FetchAppSchemaQuery($nfToken: String!, $appId: String!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    app(id: $appId) {
      graphQLSchema {
        appId
        createdAt
        id
        services {
          friendlyServiceName
          logoUrl
          service
          slug
          supportsCustomRedirectUri
          supportsCustomServiceAuth
          supportsOauthLogin
        }
        updatedAt
      }
    }
  }
}
"""

UPSERT_APP_FOR_SITE = """
mutation UpsertAppForSiteMutation($nfToken: String!, $siteId: String!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    upsertAppForNetlifySite(input: { netlifySiteId: $siteId }) {
      org {
        id
        name
      }
      app {
        id
        name
      }
    }
  }
}
"""

CREATE_NEW_SCHEMA = """
mutation CreateNewSchemaMutation($nfToken: String!, $input: OneGraphCreateGraphQLSchemaInput!) {
  oneGraph(auths: { netlifyAuth: { oauthToken: $nfToken } }) {
    createGraphQLSchema(input: $input) {
      app {
        graphQLSchema {
          id
        }
      }
      graphqlSchema {
        id
        services {
          friendlyServiceName
          logoUrl
          service
          slug
          supportsCustomRedirectUri
          supportsCustomServiceAuth
          supportsOauthLogin
        }
      }
    }
  }
}
"""

OPERATIONS: dict[str, str] = {
    "FetchCLISessionQuery": FETCH_CLI_SESSION,
    "AckCLISessionEventMutation": ACK_CLI_SESSION_EVENT,
    "CreateCLISessionMutation": CREATE_CLI_SESSION,
    "UpdateCLISessionMetadataMutation": UPDATE_CLI_SESSION_METADATA,
    "MarkCLISessionActiveHeartbeat": MARK_CLI_SESSION_ACTIVE_HEARTBEAT,
    "MarkCLISessionInactive": MARK_CLI_SESSION_INACTIVE,
    "FetchPersistedQueryQuery": FETCH_PERSISTED_QUERY,
    "CreatePersistedQueryMutation": CREATE_PERSISTED_QUERY,
    "FetchAppSchemaQuery": FETCH_APP_SCHEMA,
    "UpsertAppForSiteMutation": UPSERT_APP_FOR_SITE,
    "CreateNewSchemaMutation": CREATE_NEW_SCHEMA,
}
