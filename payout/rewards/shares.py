from eth_typing import HexStr
from web3.types import Wei

from payout.common.addresses import eth_to_io_address
from payout.rewards.typings import Reward, RewardsConfig, RewardShares, Share


def build_epoch_reward_shares(
    epoch: int,
    productivity: int,
    delegate_votes: int,
    reward: Reward,
    votes_distribution: dict[str, Wei],
    config: RewardsConfig,
) -> RewardShares:
    reward_shares = RewardShares(
        epoch_num=str(epoch),
        productivity=productivity,
        total_votes=[str(delegate_votes)],
        reward=reward,
    )
    allocate_shares(
        reward_shares=reward_shares,
        votes_distribution=votes_distribution,
        total_votes=delegate_votes,
        epoch=epoch,
        config=config,
    )
    reward_shares.check_invariants()
    return reward_shares


def allocate_shares(
    reward_shares: RewardShares,
    votes_distribution: dict[str, Wei],
    total_votes: int,
    epoch: int,
    config: RewardsConfig,
) -> RewardShares:
    """
    Splits reward_shares.reward between voters proportionally to their votes.
    Existing shares are replaced.
    """
    if votes_distribution and total_votes <= 0:
        raise ValueError(f'Total votes must be positive, got {total_votes}')

    reward = reward_shares.reward
    reward_shares.shares = {}
    for eth_address, votes in votes_distribution.items():
        share = votes * config.share_scale // total_votes

        voter_share = Share(
            eth_address=HexStr(eth_address),
            io_address=eth_to_io_address(eth_address),
            reward=Reward(
                block=_discount(share, reward.block, config.block_commission, config),
                foundation=_discount(
                    share, reward.foundation, config.foundation_commission, config
                ),
                epoch=_discount(share, reward.epoch, config.epoch_commission, config),
            ),
        )
        if not config.simple:
            voter_share.votes = [str(votes)]
            voter_share.share = [share]
            voter_share.vote_period = [epoch]

        reward_shares.shares[voter_share.eth_address] = voter_share

    return reward_shares


def combine(left: RewardShares, right: RewardShares, config: RewardsConfig) -> RewardShares:
    """
    Merges right into left and returns left.
    Voters history is appended in call order, callers should combine epochs in ascending order.
    """
    left.productivity += right.productivity
    left.total_votes = left.total_votes + right.total_votes
    left.reward = left.reward + right.reward

    for eth_address, right_share in right.shares.items():
        left_share = left.shares.get(eth_address)
        if left_share is None:
            left.shares[eth_address] = right_share
            continue

        # update the voters that exist in previous epochs
        left_share.reward = left_share.reward + right_share.reward
        if not config.simple:
            left_share.votes = left_share.votes + right_share.votes
            left_share.share = left_share.share + right_share.share
            left_share.vote_period = left_share.vote_period + right_share.vote_period

    return left


def _discount(share: int, value: int, commission: int, config: RewardsConfig) -> Wei:
    # multiply before dividing to keep precision
    return Wei(share * value * (100 - commission) // (config.share_scale * 100))
