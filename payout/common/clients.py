import logging

from gql import Client
from gql.transport.aiohttp import AIOHTTPTransport
from graphql import DocumentNode

from payout.config import settings

logger = logging.getLogger(__name__)


class GraphClient:
    """Opens a short-lived gql session per query, requests are issued sequentially."""

    def __init__(self, endpoint: str, request_timeout: int) -> None:
        self.endpoint = endpoint
        self.request_timeout = request_timeout

    async def run_query(self, query: DocumentNode, params: dict | None = None) -> dict:
        transport = AIOHTTPTransport(url=self.endpoint, timeout=self.request_timeout)
        async with Client(
            transport=transport,
            fetch_schema_from_transport=False,
            execute_timeout=self.request_timeout,
        ) as session:
            logger.debug('Running query on %s: %s', self.endpoint, params)
            return await session.execute(query, variable_values=params)


chain_graph_client = GraphClient(
    endpoint=settings.CHAIN_GRAPH_URL,
    request_timeout=settings.GRAPH_API_TIMEOUT,
)

election_graph_client = GraphClient(
    endpoint=settings.ELECTION_GRAPH_URL,
    request_timeout=settings.GRAPH_API_TIMEOUT,
)
