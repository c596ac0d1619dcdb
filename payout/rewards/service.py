import logging

from payout.chain.graph import graph_get_current_epoch_number, graph_get_epoch_meta
from payout.config import settings
from payout.election.graph import graph_get_election_snapshot
from payout.election.service import get_delegate_votes
from payout.rewards.calculator import calculate_reward
from payout.rewards.shares import build_epoch_reward_shares, combine
from payout.rewards.typings import RewardsConfig, RewardShares

logger = logging.getLogger(__name__)


async def calculate_reward_shares(
    operator: str, delegate: bytes, epochs: str, config: RewardsConfig
) -> RewardShares:
    """
    Calculates reward shares for the epochs range, current epoch if range is empty.
    Epochs are processed one by one and combined in the parsed order.
    """
    if not epochs:
        current_epoch = await graph_get_current_epoch_number()
        return await calculate_epoch_reward_shares(operator, delegate, current_epoch, config)

    epoch_numbers = parse_epoch_range(epochs)

    result = RewardShares(epoch_num=epochs)
    for epoch in epoch_numbers:
        logger.info('Processing epoch %d...', epoch)
        reward_shares = await calculate_epoch_reward_shares(operator, delegate, epoch, config)
        result = combine(result, reward_shares, config)
    return result


async def calculate_epoch_reward_shares(
    operator: str, delegate: bytes, epoch: int, config: RewardsConfig
) -> RewardShares:
    network_config = settings.NETWORK_CONFIG

    epoch_meta = await graph_get_epoch_meta(epoch)
    blocks = epoch_meta.get_productivity(operator)
    if not blocks:
        logger.info('Operator %s produced no blocks in epoch %d', operator, epoch)

    snapshot = await graph_get_election_snapshot(epoch_meta.gravity_chain_start_height)
    delegate_votes = get_delegate_votes(snapshot, delegate, network_config)

    # excluded delegates are not part of total votes and get no epoch bonus
    bonus_votes = delegate_votes.delegate_votes if delegate_votes.qualified else 0
    reward = calculate_reward(
        blocks=blocks,
        elected=delegate_votes.elected,
        delegate_votes=bonus_votes,
        total_votes=delegate_votes.total_votes,
        network_config=network_config,
    )
    logger.info(
        'Epoch %d: blocks=%d, elected=%s, voters=%d, reward=%s',
        epoch,
        blocks,
        delegate_votes.elected,
        len(delegate_votes.distribution),
        reward,
    )

    return build_epoch_reward_shares(
        epoch=epoch,
        productivity=blocks,
        delegate_votes=delegate_votes.delegate_votes,
        reward=reward,
        votes_distribution=delegate_votes.distribution,
        config=config,
    )


def parse_epoch_range(epochs: str) -> list[int]:
    """
    Parses comma separated epochs and inclusive ranges, e.g. 1-2,4,7-10.
    Duplicates are kept.
    """
    result: list[int] = []
    for part in epochs.split(','):
        part = part.strip()
        start, sep, end = part.partition('-')
        if not sep:
            result.append(_parse_epoch(part))
            continue

        first, last = _parse_epoch(start), _parse_epoch(end)
        if last < first:
            raise ValueError(f'Invalid range {first}-{last}')
        result.extend(range(first, last + 1))
    return result


def _parse_epoch(value: str) -> int:
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f'Invalid epoch number: {value!r}')
    return int(value)
