"""
handfreq: Exact Hold'em Hand Frequencies

Classifies five-card poker hands and counts, for a partially dealt
hold'em hand, how often each hand category comes up across every
possible completion of the unseen cards.
"""

__version__ = "0.1.0"
