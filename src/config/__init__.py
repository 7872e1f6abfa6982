"""League configuration"""

from .league_settings import LeagueSettings

__all__ = ['LeagueSettings']
