import json
from dataclasses import dataclass, field

from eth_typing import HexStr
from web3.types import Wei

from payout.config import settings


@dataclass(frozen=True)
class RewardsConfig:
    """
    Commission rates are percents kept by the delegate for each reward type.
    In simple mode per-epoch votes history is not kept in shares.
    """

    block_commission: int = settings.BLOCK_COMMISSION
    epoch_commission: int = settings.EPOCH_COMMISSION
    foundation_commission: int = settings.FOUNDATION_COMMISSION
    simple: bool = False
    share_scale: int = settings.SHARE_SCALE

    def __post_init__(self) -> None:
        for name in ('block_commission', 'epoch_commission', 'foundation_commission'):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f'Valid value for {name} rate is 0 to 100, got {value}')
        if self.share_scale <= 0:
            raise ValueError(f'Share scale must be positive, got {self.share_scale}')


@dataclass(frozen=True)
class Reward:
    """Amounts in Rau"""

    block: Wei = Wei(0)
    foundation: Wei = Wei(0)
    epoch: Wei = Wei(0)

    def __post_init__(self) -> None:
        if min(self.block, self.foundation, self.epoch) < 0:
            raise ValueError(f'Negative reward: {self}')

    def __add__(self, other: 'Reward') -> 'Reward':
        return Reward(
            block=Wei(self.block + other.block),
            foundation=Wei(self.foundation + other.foundation),
            epoch=Wei(self.epoch + other.epoch),
        )

    @property
    def total(self) -> Wei:
        return Wei(self.block + self.foundation + self.epoch)

    def as_dict(self) -> dict:
        return {
            'block': str(self.block),
            'foundation': str(self.foundation),
            'epoch': str(self.epoch),
        }

    @staticmethod
    def from_dict(data: dict) -> 'Reward':
        return Reward(
            block=Wei(int(data['block'])),
            foundation=Wei(int(data['foundation'])),
            epoch=Wei(int(data['epoch'])),
        )


@dataclass
class Share:
    """
    Voter's reward share. Votes, share and vote_period are indexed by the same epoch.
    """

    eth_address: HexStr
    io_address: str
    votes: list[str] = field(default_factory=list)
    share: list[int] = field(default_factory=list)
    vote_period: list[int] = field(default_factory=list)
    reward: Reward = field(default_factory=Reward)

    def as_dict(self) -> dict:
        return {
            'ioaddr': self.io_address,
            'ethaddr': self.eth_address,
            'votes': self.votes,
            'share': self.share,
            'voteperiod': self.vote_period,
            'reward': self.reward.as_dict(),
        }

    @staticmethod
    def from_dict(data: dict) -> 'Share':
        return Share(
            eth_address=HexStr(data['ethaddr']),
            io_address=data['ioaddr'],
            votes=list(data.get('votes') or []),
            share=[int(value) for value in data.get('share') or []],
            vote_period=[int(value) for value in data.get('voteperiod') or []],
            reward=Reward.from_dict(data['reward']),
        )


@dataclass
class RewardShares:
    epoch_num: str = ''
    productivity: int = 0
    total_votes: list[str] = field(default_factory=list)
    reward: Reward = field(default_factory=Reward)
    # keyed by voter eth address
    shares: dict[HexStr, Share] = field(default_factory=dict)

    def check_invariants(self) -> None:
        shares_reward = sum((share.reward for share in self.shares.values()), Reward())
        for name in ('block', 'foundation', 'epoch'):
            if getattr(shares_reward, name) > getattr(self.reward, name):
                raise ValueError(
                    f'Voters {name} reward {getattr(shares_reward, name)} '
                    f'exceeds total {getattr(self.reward, name)}'
                )
        for address, share in self.shares.items():
            if address != share.eth_address:
                raise ValueError(f'Share key {address} does not match {share.eth_address}')

    def as_dict(self) -> dict:
        return {
            'epochnum': self.epoch_num,
            'productivity': self.productivity,
            'votes': self.total_votes,
            'reward': self.reward.as_dict(),
            'shares': [share.as_dict() for share in self.shares.values()],
        }

    def to_json(self, indent: int | None = None) -> str:
        if indent is None:
            return json.dumps(self.as_dict(), separators=(',', ':'))
        return json.dumps(self.as_dict(), indent=indent)

    def __str__(self) -> str:
        return self.to_json(indent=4)

    @staticmethod
    def from_dict(data: dict) -> 'RewardShares':
        shares = [Share.from_dict(item) for item in data.get('shares') or []]
        return RewardShares(
            epoch_num=str(data['epochnum']),
            productivity=int(data['productivity']),
            total_votes=list(data.get('votes') or []),
            reward=Reward.from_dict(data['reward']),
            shares={share.eth_address: share for share in shares},
        )
