import json
from decimal import Decimal

from web3 import Web3

from payout.multisend.typings import MultisendReward
from payout.rewards.typings import RewardShares


def build_multisend_rewards(reward_shares: RewardShares) -> list[MultisendReward]:
    """Recipients with total rewards in IOTX, the input for the multisend tool"""
    rewards = []
    for share in reward_shares.shares.values():
        rewards.append(
            MultisendReward(
                recipient=f'0x{share.eth_address}',
                amount=format_amount(share.reward.total),
            )
        )
    return rewards


def format_amount(value: int) -> str:
    amount = Decimal(Web3.from_wei(value, 'ether'))
    return format(amount.normalize(), 'f')


def multisend_to_json(rewards: list[MultisendReward]) -> str:
    return json.dumps([reward.as_dict() for reward in rewards], separators=(',', ':'))
