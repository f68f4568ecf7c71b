"""pokelogs - availability and latency reports scraped from Poke* module logs."""

__version__ = "0.1.0"
