import logging

import bech32
from eth_typing import HexStr
from web3 import Web3

from payout.config import settings

logger = logging.getLogger(__name__)

ADDRESS_LENGTH = 20
DELEGATE_NAME_LENGTH = 12


def eth_to_io_address(eth_address: str, hrp: str | None = None) -> str:
    """Encodes 20 address bytes in the native bech32 form, e.g. io1..."""
    hrp = hrp or settings.NETWORK_CONFIG.ADDRESS_HRP
    payload = Web3.to_bytes(hexstr=HexStr(eth_address))
    if len(payload) != ADDRESS_LENGTH:
        raise ValueError(f'Invalid address length: {eth_address}')
    data = bech32.convertbits(payload, 8, 5)
    return bech32.bech32_encode(hrp, data)


def io_to_eth_address(io_address: str, hrp: str | None = None) -> HexStr:
    """Returns lower-case hex of the address bytes without 0x prefix"""
    hrp = hrp or settings.NETWORK_CONFIG.ADDRESS_HRP
    decoded_hrp, data = bech32.bech32_decode(io_address)
    if decoded_hrp != hrp or data is None:
        raise ValueError(f'Invalid address: {io_address}')
    payload = bech32.convertbits(data, 5, 8, False)
    if payload is None or len(payload) != ADDRESS_LENGTH:
        raise ValueError(f'Invalid address: {io_address}')
    return HexStr(bytes(payload).hex())


def is_io_address(value: str) -> bool:
    try:
        io_to_eth_address(value)
    except ValueError:
        return False
    return True


def get_address_aliases() -> dict[str, str]:
    aliases: dict[str, str] = {}
    for item in settings.ADDRESS_ALIASES:
        alias, sep, address = item.partition(':')
        if not sep or not alias.strip() or not address.strip():
            raise ValueError(f'Invalid address alias: {item}')
        aliases[alias.strip()] = address.strip()
    return aliases


def resolve_address(alias_or_address: str) -> str:
    """
    Returns native address for the given alias or address.
    Hex addresses are converted to native form.
    """
    if is_io_address(alias_or_address):
        return alias_or_address

    if Web3.is_address(alias_or_address):
        return eth_to_io_address(alias_or_address)

    aliases = get_address_aliases()
    address = aliases.get(alias_or_address)
    if address is None:
        raise ValueError(f'Unknown address alias: {alias_or_address}')

    logger.debug('Resolved alias %s to %s', alias_or_address, address)
    if is_io_address(address):
        return address
    if Web3.is_address(address):
        return eth_to_io_address(address)
    raise ValueError(f'Invalid address for alias {alias_or_address}: {address}')


def delegate_name(name: str) -> bytes:
    """
    Converts delegate name to the 12-byte on-chain key.
    Longer names keep the last 12 bytes, shorter ones are left padded with zero bytes.
    """
    raw = name.encode()
    if len(raw) > DELEGATE_NAME_LENGTH:
        return raw[-DELEGATE_NAME_LENGTH:]
    return raw.rjust(DELEGATE_NAME_LENGTH, b'\x00')
