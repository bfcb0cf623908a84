"""Integration layer around the confluence engine.

Loads candle series, configures the scoring policy, runs the analysis
and formats results for the console or JSON. Run ``python -m analyst``
for the command line interface.
"""
