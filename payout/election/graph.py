import logging

from gql import gql

from payout.common.clients import election_graph_client
from payout.common.decorators import retry_graph_errors
from payout.election.typings import Delegate, ElectionSnapshot

logger = logging.getLogger(__name__)


@retry_graph_errors()
async def graph_get_election_snapshot(height: int) -> ElectionSnapshot:
    """
    Returns delegates with their votes at the gravity chain height.
    Delegates order is the order returned by the election service.
    """
    query = gql(
        """
        query ElectionResult($height: Int!) {
          electionResult(height: $height) {
            delegates {
              name
              selfStakingTokens
              votes {
                voter
                weightedAmount
              }
            }
          }
        }
        """
    )
    params = {'height': height}

    response = await election_graph_client.run_query(query, params)
    result = response.get('electionResult')
    if not result:
        raise RuntimeError(f'No election result at gravity chain height {height}')

    delegates = [Delegate.from_graph(item) for item in result['delegates'] or []]
    logger.debug('Fetched %d delegates at gravity chain height %d', len(delegates), height)

    return ElectionSnapshot(height=height, delegates=delegates)
