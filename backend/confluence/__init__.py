"""Confluence signal engine.

This package contains pure business logic with no I/O dependencies
(no network, no files, no database). It turns an already-annotated price
series into retracement levels, per-indicator signals and a single
BUY / SELL / HOLD confluence result. Fetching and storing series lives in
the `analyst` package.
"""
