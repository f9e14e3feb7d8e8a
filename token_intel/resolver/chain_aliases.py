"""Canonical chain ids and the casual names that refer to them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Insertion order matters: the first chain owning an alias wins.
CHAIN_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "eth": ("eth", "ethereum", "ether", "mainnet"),
        "bsc": ("bsc", "binance", "bnb", "binance smart chain", "smartchain"),
        "polygon": ("polygon", "matic", "poly"),
        "arbitrum": ("arbitrum", "arb", "arbitrum one"),
        "avalanche": ("avalanche", "avax", "avalanche c-chain"),
        "base": ("base",),
        "optimism": ("optimism", "op", "optimistic"),
        "fantom": ("fantom", "ftm", "opera"),
        "cronos": ("cronos", "cro"),
        "gnosis": ("gnosis", "xdai", "dai chain"),
        "celo": ("celo",),
        "moonbeam": ("moonbeam", "glmr"),
        "moonriver": ("moonriver", "movr"),
        "harmony": ("harmony", "one"),
        "aurora": ("aurora",),
        "metis": ("metis", "andromeda"),
        "boba": ("boba",),
        "kcc": ("kcc", "kucoin"),
        "heco": ("heco", "huobi"),
        "okex": ("okex", "okexchain", "okc"),
        "zkera": ("zkera", "zksync era", "era"),
        "zksync": ("zksync", "zks"),
        "polygonzkevm": ("polygon zkevm", "zkevm"),
        "linea": ("linea",),
        "mantle": ("mantle",),
        "scroll": ("scroll",),
        "core": ("core", "core dao"),
        "telos": ("telos",),
        "syscoin": ("syscoin", "sys"),
        "conflux": ("conflux", "cfx"),
        "klaytn": ("klaytn", "klay"),
        "fusion": ("fusion", "fsn"),
        "canto": ("canto",),
        "nova": ("nova", "arbitrum nova"),
        "fuse": ("fuse",),
        "evmos": ("evmos",),
        "astar": ("astar",),
        "dogechain": ("dogechain", "doge"),
        "thundercore": ("thundercore", "tt"),
        "oasis": ("oasis",),
        "velas": ("velas",),
        "meter": ("meter",),
        "sx": ("sx", "sx network"),
        "kardiachain": ("kardiachain", "kai"),
        "wanchain": ("wanchain", "wan"),
        "gochain": ("gochain",),
        "ethereumpow": ("ethereumpow", "ethw"),
        "pulse": ("pulsechain", "pls"),
        "kava": ("kava",),
        "milkomeda": ("milkomeda",),
        "nahmii": ("nahmii",),
        "worldchain": ("worldchain",),
        "ink": ("ink",),
        "soneium": ("soneium",),
        "sonic": ("sonic",),
        "morph": ("morph",),
        "real": ("real", "re.al"),
        "mode": ("mode",),
        "zeta": ("zeta",),
        "blast": ("blast",),
        "unichain": ("unichain",),
        "abstract": ("abstract",),
        "step": ("step", "stepnetwork"),
        "ronin": ("ronin", "ron"),
        "iotex": ("iotex",),
        "shiden": ("shiden",),
        "elastos": ("elastos", "ela"),
        "solana": ("solana", "sol"),
        "tron": ("tron", "trx"),
        "sui": ("sui",),
    }
)


def supported_chains() -> tuple[str, ...]:
    """Canonical chain ids in table order."""
    return tuple(CHAIN_ALIASES)
