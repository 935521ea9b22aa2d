"""
PokerAI: hold'em equity and preflop strength core

Monte Carlo equity against random opponents, 5-card hand ranking,
preflop hand classification and board-texture analysis. Cards come in
as two-character codes ('As', 'Td'); results go out as plain numbers.
"""

__version__ = "0.1.0"
