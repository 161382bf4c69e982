"""Financial projection engine behind the EMI, SIP, goal, retirement, tax and rent-vs-buy calculators."""

__version__ = "0.1.0"
