"""
League Model

League, Team, Player and Pick models, the league factory, the
draft-pick window and the rookie draft.
"""

from .models import League, Team, TeamRecord, Player, Pick
from .picks import seed_team_picks, regenerate_picks, transfer_pick, pick_value
from .league_factory import make_league, make_player, generate_contract, team_rating
from .draft import rookie_contract, generate_draft_class, draft_order, run_draft

__all__ = [
    'League',
    'Team',
    'TeamRecord',
    'Player',
    'Pick',
    'seed_team_picks',
    'regenerate_picks',
    'transfer_pick',
    'pick_value',
    'make_league',
    'make_player',
    'generate_contract',
    'team_rating',
    'rookie_contract',
    'generate_draft_class',
    'draft_order',
    'run_draft',
]
