import pytest
from web3 import Web3

from payout.config.networks import MAINNET, NETWORKS
from payout.rewards.calculator import calculate_reward

NETWORK_CONFIG = NETWORKS[MAINNET]


class TestCalculateReward:
    def test_elected(self):
        reward = calculate_reward(
            blocks=8,
            elected=True,
            delegate_votes=500,
            total_votes=1000,
            network_config=NETWORK_CONFIG,
        )

        assert reward.block == Web3.to_wei(8 * 16, 'ether')
        assert reward.foundation == Web3.to_wei(80, 'ether')
        assert reward.epoch == Web3.to_wei(6250, 'ether')

    def test_not_elected(self):
        reward = calculate_reward(
            blocks=8,
            elected=False,
            delegate_votes=500,
            total_votes=1000,
            network_config=NETWORK_CONFIG,
        )

        assert reward.foundation == 0
        assert reward.block == Web3.to_wei(8 * 16, 'ether')

    @pytest.mark.parametrize('blocks', [0, 1, 15, 720, 10**6])
    def test_block_reward_exact(self, blocks):
        reward = calculate_reward(
            blocks=blocks,
            elected=False,
            delegate_votes=0,
            total_votes=1,
            network_config=NETWORK_CONFIG,
        )
        assert reward.block == blocks * NETWORK_CONFIG.BLOCK_REWARD
        assert reward.epoch == 0

    def test_epoch_bonus_floor(self):
        reward = calculate_reward(
            blocks=0,
            elected=False,
            delegate_votes=1,
            total_votes=3,
            network_config=NETWORK_CONFIG,
        )
        assert reward.epoch == NETWORK_CONFIG.EPOCH_BONUS // 3

    def test_epoch_bonus_monotonic(self):
        total_votes = 7 * 10**25
        previous = 0
        for delegate_votes in range(0, total_votes + 1, total_votes // 50):
            reward = calculate_reward(
                blocks=0,
                elected=True,
                delegate_votes=delegate_votes,
                total_votes=total_votes,
                network_config=NETWORK_CONFIG,
            )
            assert reward.epoch >= previous
            assert reward.epoch <= NETWORK_CONFIG.EPOCH_BONUS
            previous = reward.epoch

    def test_large_votes(self):
        votes = 123_456_789 * 10**18 + 1
        total = 987_654_321 * 10**18 + 7
        reward = calculate_reward(
            blocks=0,
            elected=True,
            delegate_votes=votes,
            total_votes=total,
            network_config=NETWORK_CONFIG,
        )
        assert reward.epoch == NETWORK_CONFIG.EPOCH_BONUS * votes // total

    def test_zero_total_votes(self):
        with pytest.raises(ValueError):
            calculate_reward(
                blocks=1,
                elected=True,
                delegate_votes=0,
                total_votes=0,
                network_config=NETWORK_CONFIG,
            )

    def test_negative_blocks(self):
        with pytest.raises(ValueError):
            calculate_reward(
                blocks=-1,
                elected=True,
                delegate_votes=1,
                total_votes=1,
                network_config=NETWORK_CONFIG,
            )

    def test_delegate_votes_exceed_total(self):
        with pytest.raises(ValueError):
            calculate_reward(
                blocks=1,
                elected=False,
                delegate_votes=11,
                total_votes=10,
                network_config=NETWORK_CONFIG,
            )
