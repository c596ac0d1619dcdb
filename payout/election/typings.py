from dataclasses import dataclass, field

from web3 import Web3
from web3.types import Wei


@dataclass
class Vote:
    voter: bytes
    weighted_amount: Wei

    @staticmethod
    def from_graph(data: dict) -> 'Vote':
        return Vote(
            voter=Web3.to_bytes(hexstr=data['voter']),
            weighted_amount=Wei(int(data['weightedAmount'])),
        )


@dataclass
class Delegate:
    name: bytes
    self_staking_tokens: Wei
    votes: list[Vote] = field(default_factory=list)

    @property
    def total_votes(self) -> Wei:
        return Wei(sum(vote.weighted_amount for vote in self.votes))

    @staticmethod
    def from_graph(data: dict) -> 'Delegate':
        return Delegate(
            name=Web3.to_bytes(hexstr=data['name']),
            self_staking_tokens=Wei(int(data['selfStakingTokens'])),
            votes=[Vote.from_graph(item) for item in data['votes'] or []],
        )


@dataclass
class ElectionSnapshot:
    """Election result at the gravity chain height, delegates are kept in source order"""

    height: int
    delegates: list[Delegate]

    def get_delegate(self, name: bytes) -> Delegate | None:
        for delegate in self.delegates:
            if delegate.name == name:
                return delegate
        return None


@dataclass
class DelegateVotes:
    elected: bool
    # passed robot votes and minimums filters
    qualified: bool
    # voter address hex (no 0x prefix) -> weighted votes
    distribution: dict[str, Wei]
    delegate_votes: Wei
    total_votes: Wei
