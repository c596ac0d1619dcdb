from web3.types import Wei

from payout.config.networks import NetworkConfig
from payout.rewards.typings import Reward


def calculate_reward(
    blocks: int,
    elected: bool,
    delegate_votes: int,
    total_votes: int,
    network_config: NetworkConfig,
) -> Reward:
    """
    Delegate's epoch reward:
      - block reward for each produced block
      - foundation bonus if the delegate was elected
      - epoch bonus pool split by the delegate's part of total votes
    """
    if blocks < 0:
        raise ValueError(f'Invalid number of produced blocks: {blocks}')
    if delegate_votes < 0:
        raise ValueError(f'Invalid delegate votes: {delegate_votes}')
    if total_votes <= 0:
        raise ValueError(f'Total votes must be positive, got {total_votes}')
    if delegate_votes > total_votes:
        raise ValueError(f'Delegate votes {delegate_votes} exceed total votes {total_votes}')

    block = blocks * network_config.BLOCK_REWARD
    foundation = network_config.FOUNDATION_BONUS if elected else 0
    epoch = network_config.EPOCH_BONUS * delegate_votes // total_votes

    return Reward(block=Wei(block), foundation=Wei(foundation), epoch=Wei(epoch))
