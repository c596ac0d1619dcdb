from dataclasses import dataclass

from web3 import Web3
from web3.types import Wei

MAINNET = 'mainnet'
TESTNET = 'testnet'

ENABLED_NETWORKS = [MAINNET, TESTNET]


@dataclass
class NetworkConfig:
    SYMBOL: str
    # bech32 human readable part of native addresses
    ADDRESS_HRP: str
    BLOCK_REWARD: Wei
    # The foundation allocates 1920 IOTX every day, a day has 24 epochs,
    # so each epoch gets 1920 / 24 = 80 IOTX of foundation bonus
    # and 300000 / 24 = 12500 IOTX of epoch bonus.
    FOUNDATION_BONUS: Wei
    EPOCH_BONUS: Wei
    NUM_DELEGATES: int
    ROBOT_VOTES: Wei
    SMALL_ROBOT_VOTES: Wei
    MIN_DELEGATE_VOTES: Wei
    MIN_SELF_STAKING_TOKENS: Wei


NETWORKS = {
    MAINNET: NetworkConfig(
        SYMBOL='IOTX',
        ADDRESS_HRP='io',
        BLOCK_REWARD=Web3.to_wei(16, 'ether'),
        FOUNDATION_BONUS=Web3.to_wei(80, 'ether'),
        EPOCH_BONUS=Web3.to_wei(12500, 'ether'),
        NUM_DELEGATES=36,
        ROBOT_VOTES=Web3.to_wei(100_000_000, 'ether'),
        SMALL_ROBOT_VOTES=Web3.to_wei(100, 'ether'),
        MIN_DELEGATE_VOTES=Web3.to_wei(2_000_000, 'ether'),
        MIN_SELF_STAKING_TOKENS=Web3.to_wei(1_200_000, 'ether'),
    ),
    TESTNET: NetworkConfig(
        SYMBOL='IOTX',
        ADDRESS_HRP='io',
        BLOCK_REWARD=Web3.to_wei(16, 'ether'),
        FOUNDATION_BONUS=Web3.to_wei(80, 'ether'),
        EPOCH_BONUS=Web3.to_wei(12500, 'ether'),
        NUM_DELEGATES=36,
        ROBOT_VOTES=Web3.to_wei(100_000_000, 'ether'),
        SMALL_ROBOT_VOTES=Web3.to_wei(100, 'ether'),
        MIN_DELEGATE_VOTES=Web3.to_wei(0, 'ether'),
        MIN_SELF_STAKING_TOKENS=Web3.to_wei(0, 'ether'),
    ),
}
