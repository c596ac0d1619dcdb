import json
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner
from web3 import Web3
from web3.types import Wei

from payout.common.addresses import delegate_name, eth_to_io_address
from payout.config import settings
from payout.main import main
from payout.rewards.tests.factories import create_reward_shares, create_share
from payout.rewards.typings import Reward, RewardsConfig

OPERATOR = eth_to_io_address('7d5943b6ee8093be7dc75cd095ee12bfd6c8bf6c')


def _reward_shares():
    share = create_share(reward=Reward(epoch=Wei(Web3.to_wei(2, 'ether'))))
    return create_reward_shares(shares=[share], epoch_num='1-2'), share


class TestMain:
    def test_stdout(self):
        reward_shares, share = _reward_shares()
        calculate_mock = AsyncMock(return_value=reward_shares)
        with patch('payout.main.calculate_reward_shares', new=calculate_mock):
            result = CliRunner().invoke(
                main, ['delegate', OPERATOR, '-b', '10', '-p', '20', '-f', '30', '-e', '1-2']
            )

        assert result.exit_code == 0, result.output
        calculate_mock.assert_awaited_once_with(
            operator=OPERATOR,
            delegate=delegate_name('delegate'),
            epochs='1-2',
            config=RewardsConfig(
                block_commission=10, epoch_commission=20, foundation_commission=30, simple=False
            ),
        )

        multisend_line, report = result.output.split('\n', 1)
        assert json.loads(multisend_line) == [
            {'recipient': f'0x{share.eth_address}', 'amount': '2'}
        ]
        assert json.loads(report) == reward_shares.as_dict()

    def test_simple_current_epoch(self):
        reward_shares, _ = _reward_shares()
        calculate_mock = AsyncMock(return_value=reward_shares)
        with patch('payout.main.calculate_reward_shares', new=calculate_mock):
            result = CliRunner().invoke(main, ['delegate', OPERATOR, '--simple'])

        assert result.exit_code == 0, result.output
        kwargs = calculate_mock.await_args.kwargs
        assert kwargs['epochs'] == ''
        assert kwargs['config'].simple is True

    def test_output_file(self, output_file):
        reward_shares, _ = _reward_shares()
        with patch(
            'payout.main.calculate_reward_shares', new=AsyncMock(return_value=reward_shares)
        ):
            for _ in range(2):
                result = CliRunner().invoke(
                    main, ['delegate', OPERATOR, '-o', str(output_file)]
                )
                assert result.exit_code == 0, result.output

        lines = output_file.read_text().splitlines()
        assert len(lines) == 2
        assert all(json.loads(line) == reward_shares.as_dict() for line in lines)

    def test_invalid_commission(self):
        calculate_mock = AsyncMock()
        with patch('payout.main.calculate_reward_shares', new=calculate_mock):
            result = CliRunner().invoke(main, ['delegate', OPERATOR, '-b', '101'])

        assert result.exit_code == 2
        calculate_mock.assert_not_awaited()

    def test_missing_arguments(self):
        result = CliRunner().invoke(main, ['delegate'])
        assert result.exit_code == 2

    def test_invalid_range(self):
        with patch(
            'payout.main.calculate_reward_shares',
            new=AsyncMock(side_effect=ValueError('Invalid range 5-2')),
        ):
            result = CliRunner().invoke(main, ['delegate', OPERATOR, '-e', '5-2'])

        assert result.exit_code == 1
        assert 'epochnum' not in result.output

    def test_unknown_alias(self):
        calculate_mock = AsyncMock()
        with (
            patch('payout.main.calculate_reward_shares', new=calculate_mock),
            patch.object(settings, 'ADDRESS_ALIASES', []),
        ):
            result = CliRunner().invoke(main, ['delegate', 'unknown'])

        assert result.exit_code == 1
        calculate_mock.assert_not_awaited()
