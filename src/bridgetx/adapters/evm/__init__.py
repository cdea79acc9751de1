"""EVM chain-state adapter backed by web3.py."""

from __future__ import annotations

from .reader import Web3ChainStateReader, build_async_web3, receipt_from_web3

__all__ = ["Web3ChainStateReader", "build_async_web3", "receipt_from_web3"]
