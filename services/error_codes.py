"""
Standard error codes for service layer.

These error codes allow transports to programmatically handle specific
error conditions without parsing error message text.

Usage:
    from services.error_codes import TOO_FEW_PLAYERS
    from services.result import Result

    if len(player_ids) <= 1:
        return Result.fail("Too few players to shuffle", code=TOO_FEW_PLAYERS)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Roster errors
TOO_FEW_PLAYERS = "too_few_players"
ODD_ROSTER = "odd_roster"
ROSTER_TOO_LARGE = "roster_too_large"
RATING_COUNT_MISMATCH = "rating_count_mismatch"
DUPLICATE_PLAYER = "duplicate_player"
