"""
Reusable Discord embed builders.
"""

import discord

from domain.models.faction import Faction
from domain.models.shuffle_result import PlayerSkill, ShuffleResult
from utils.formatting import format_faction, format_team


def create_shuffle_embed(result: ShuffleResult) -> discord.Embed:
    """Embed showing both teams and the shuffle diagnostics."""
    if not result.success:
        return discord.Embed(
            title="Shuffle failed",
            description=result.message,
            color=discord.Color.red(),
        )

    embed = discord.Embed(
        title="⚖️ Balanced Shuffle",
        description=result.message,
        color=discord.Color.green(),
    )
    embed.add_field(name=format_faction(Faction.MARINE), value=format_team(result.team1), inline=True)
    embed.add_field(name=format_faction(Faction.ALIEN), value=format_team(result.team2), inline=True)

    diagnostics = result.diagnostics
    embed.set_footer(
        text=(
            f"Score {diagnostics.get('Score', '?')} | "
            f"Repeat {diagnostics.get('RScore', '?')} | "
            f"{diagnostics.get('Candidates', '?')} splits in {diagnostics.get('Time elapsed', '?')}"
        )
    )
    return embed


def create_player_skill_embed(skill: PlayerSkill) -> discord.Embed:
    """Embed with a player's faction-adjusted skills."""
    embed = discord.Embed(
        title=f"{skill.name} ({skill.player_id})",
        color=discord.Color.blue(),
    )
    embed.add_field(name=format_faction(Faction.MARINE), value=str(skill.marine_skill), inline=True)
    embed.add_field(name=format_faction(Faction.ALIEN), value=str(skill.alien_skill), inline=True)
    return embed
