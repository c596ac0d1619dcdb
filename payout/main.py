import asyncio
import logging
import sys

import click

import payout
from payout.common.addresses import delegate_name, resolve_address
from payout.config.settings import (
    BLOCK_COMMISSION,
    EPOCH_COMMISSION,
    FOUNDATION_COMMISSION,
    GQL_LOG_LEVEL,
    LOG_LEVEL,
    NETWORK,
    SENTRY_DSN,
)
from payout.multisend.service import build_multisend_rewards, multisend_to_json
from payout.rewards.service import calculate_reward_shares
from payout.rewards.typings import RewardsConfig, RewardShares

logging.basicConfig(
    format='%(asctime)s %(name)s %(levelname)-8s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    level=LOG_LEVEL,
)

logging.getLogger('gql').setLevel(GQL_LOG_LEVEL)

logger = logging.getLogger(__name__)


async def run_payout(
    delegate: str, operator: str, epochs: str, config: RewardsConfig
) -> RewardShares:
    operator_address = resolve_address(operator)
    logger.info(
        'Calculating rewards for delegate %s, operator %s, epochs %s',
        delegate,
        operator_address,
        epochs or 'current',
    )
    return await calculate_reward_shares(
        operator=operator_address,
        delegate=delegate_name(delegate),
        epochs=epochs,
        config=config,
    )


@click.command(
    help="Calculates voters' reward shares of an IoTeX delegate "
    'and prints the input for the multisend tool.'
)
@click.argument('delegate', metavar='DELEGATE_NAME')
@click.argument('operator', metavar='OPERATOR_[ALIAS|ADDRESS]')
@click.option(
    '-b',
    '--block-commission',
    type=click.IntRange(0, 100),
    default=BLOCK_COMMISSION,
    show_default=True,
    help='Commission rate of block reward, percent.',
)
@click.option(
    '-p',
    '--epoch-commission',
    type=click.IntRange(0, 100),
    default=EPOCH_COMMISSION,
    show_default=True,
    help='Commission rate of epoch bonus, percent.',
)
@click.option(
    '-f',
    '--foundation-commission',
    type=click.IntRange(0, 100),
    default=FOUNDATION_COMMISSION,
    show_default=True,
    help='Commission rate of foundation bonus, percent.',
)
@click.option(
    '-o',
    '--output',
    type=click.Path(dir_okay=False),
    default=None,
    help='File to append the result to, stdout by default.',
)
@click.option(
    '-e',
    '--epoch',
    'epochs',
    default='',
    help='Epoch(s) to calculate rewards for, current epoch by default. '
    'The input is in range format, e.g. 1-2,4,7-10.',
)
@click.option(
    '-s',
    '--simple',
    is_flag=True,
    default=False,
    help='Print rewards only, without per-epoch votes information.',
)
# pylint: disable-next=too-many-arguments
def main(
    delegate: str,
    operator: str,
    block_commission: int,
    epoch_commission: int,
    foundation_commission: int,
    output: str | None,
    epochs: str,
    simple: bool,
) -> None:
    logger.debug('Starting payout, version %s', payout.__version__)
    try:
        config = RewardsConfig(
            block_commission=block_commission,
            epoch_commission=epoch_commission,
            foundation_commission=foundation_commission,
            simple=simple,
        )
        reward_shares = asyncio.run(
            run_payout(delegate=delegate, operator=operator, epochs=epochs, config=config)
        )
    except Exception as exc:
        logger.exception(exc)
        sys.exit(1)

    click.echo(multisend_to_json(build_multisend_rewards(reward_shares)))

    if not output:
        click.echo(reward_shares.to_json(indent=4))
        return

    with open(output, 'a', encoding='utf-8') as f:
        f.write(reward_shares.to_json() + '\n')
    logger.info('Result appended to %s', output)


def cli() -> None:
    if SENTRY_DSN:
        import sentry_sdk

        sentry_sdk.init(
            SENTRY_DSN,
            traces_sample_rate=0.1,
            environment=NETWORK,
        )
        sentry_sdk.set_tag('network', NETWORK)
        sentry_sdk.set_tag('project_version', payout.__version__)

    main()  # pylint: disable=no-value-for-parameter


if __name__ == '__main__':
    cli()
