import logging

from gql import gql

from payout.chain.typings import EpochMeta
from payout.common.clients import chain_graph_client

logger = logging.getLogger(__name__)


async def graph_get_current_epoch_number() -> int:
    query = gql(
        """
        query ChainMeta {
          chainMeta {
            epoch {
              num
            }
          }
        }
        """
    )
    response = await chain_graph_client.run_query(query)
    chain_meta = response.get('chainMeta')
    if not chain_meta:
        raise RuntimeError(f'Failed to fetch chain meta from {chain_graph_client.endpoint}')
    return int(chain_meta['epoch']['num'])


async def graph_get_epoch_meta(epoch_number: int) -> EpochMeta:
    query = gql(
        """
        query EpochMeta($epochNumber: Int!) {
          epochMeta(epochNumber: $epochNumber) {
            epochData {
              num
              height
              gravityChainStartHeight
            }
            blockProducersInfo {
              address
              production
            }
          }
        }
        """
    )
    params = {'epochNumber': epoch_number}

    response = await chain_graph_client.run_query(query, params)
    data = response.get('epochMeta')
    if not data or not data.get('epochData'):
        raise RuntimeError(f'Epoch {epoch_number} does not exist')

    epoch_meta = EpochMeta.from_graph(data)
    logger.debug(
        'Epoch %d: height=%d, gravity height=%d, block producers=%d',
        epoch_meta.num,
        epoch_meta.height,
        epoch_meta.gravity_chain_start_height,
        len(epoch_meta.block_producers),
    )
    return epoch_meta
