"""Generate date tags such as 20240427 or TEST_202404, from Python or the command line."""

__version__ = "0.3.1"