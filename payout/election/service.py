import logging

from web3.types import Wei

from payout.config.networks import NetworkConfig
from payout.election.typings import Delegate, DelegateVotes, ElectionSnapshot

logger = logging.getLogger(__name__)


def get_delegate_votes(
    snapshot: ElectionSnapshot, delegate_name: bytes, network_config: NetworkConfig
) -> DelegateVotes:
    """
    Collects the delegate's voters distribution and election status.

    Total votes only include delegates passing the filters: robot votes,
    minimum delegate votes and minimum self staking tokens.
    The delegate is elected if it ranks within NUM_DELEGATES of the remaining
    delegates by total votes, equal totals keep snapshot order.
    """
    qualified_delegates: list[tuple[Delegate, Wei]] = []
    for delegate in snapshot.delegates:
        delegate_total = delegate.total_votes
        if is_qualified(delegate, delegate_total, network_config):
            qualified_delegates.append((delegate, delegate_total))

    total_votes = sum(delegate_total for _, delegate_total in qualified_delegates)

    # sorted is stable
    ranking = sorted(qualified_delegates, key=lambda item: item[1], reverse=True)
    qualified = False
    elected = False
    for rank, (delegate, _) in enumerate(ranking):
        if delegate.name == delegate_name:
            qualified = True
            elected = rank < network_config.NUM_DELEGATES
            break

    distribution: dict[str, Wei] = {}
    delegate_votes = 0
    target = snapshot.get_delegate(delegate_name)
    for vote in target.votes if target else []:
        voter = vote.voter.hex()
        # merge votes from the same voter
        distribution[voter] = Wei(distribution.get(voter, 0) + vote.weighted_amount)
        delegate_votes += vote.weighted_amount

    if target is None:
        logger.warning('Delegate %r not found at height %d', delegate_name, snapshot.height)

    return DelegateVotes(
        elected=elected,
        qualified=qualified,
        distribution=distribution,
        delegate_votes=Wei(delegate_votes),
        total_votes=Wei(total_votes),
    )


def is_qualified(delegate: Delegate, delegate_total: Wei, network_config: NetworkConfig) -> bool:
    # robot votes
    if delegate_total in (network_config.ROBOT_VOTES, network_config.SMALL_ROBOT_VOTES):
        return False
    if delegate_total < network_config.MIN_DELEGATE_VOTES:
        return False
    if delegate.self_staking_tokens < network_config.MIN_SELF_STAKING_TOKENS:
        return False
    return True
