"""Screens of a running round: countdown, answering and matchup voting.

All three are laid out entirely in KV and only read their surfaces.
"""

from receiver.screens.surface_screen import SurfaceScreen


class CountdownScreen(SurfaceScreen):
    pass


class AnsweringScreen(SurfaceScreen):
    pass


class MatchupVotingScreen(SurfaceScreen):
    pass
