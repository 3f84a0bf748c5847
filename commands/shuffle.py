"""
Shuffle commands: /shuffle, /skill
"""

import asyncio
import logging

import discord
from discord import app_commands
from discord.ext import commands

from repositories.exceptions import HistoryUnavailableError
from services.interfaces import IShuffleService
from utils.embeds import create_player_skill_embed, create_shuffle_embed
from utils.formatting import parse_int_csv

logger = logging.getLogger("ns2_shuffle.commands.shuffle")

HISTORY_ERROR_MESSAGE = "Round history is unavailable right now. Please try again later."


class ShuffleCommands(commands.Cog):
    """Slash commands exposing the balanced shuffle to Discord."""

    def __init__(self, bot: commands.Bot, shuffle_service: IShuffleService):
        self.bot = bot
        self.shuffle_service = shuffle_service

    @app_commands.command(name="shuffle", description="Split players into balanced Marine and Alien teams")
    @app_commands.describe(
        ns2ids="Comma-separated NS2 ids, e.g. 101, 102, 103, 104",
        skills="Comma-separated hive skills in the same order",
    )
    async def shuffle(self, interaction: discord.Interaction, ns2ids: str, skills: str):
        """Run a balanced shuffle for the given roster."""
        try:
            player_ids = parse_int_csv(ns2ids)
            ratings = parse_int_csv(skills)
        except ValueError as e:
            await interaction.response.send_message(content=f"❌ {e}", ephemeral=True)
            return

        await interaction.response.defer()
        try:
            # Enumeration is CPU-bound; keep the event loop responsive
            result = await asyncio.to_thread(self.shuffle_service.shuffle, player_ids, ratings)
        except HistoryUnavailableError as e:
            logger.error(f"Shuffle failed: {e}")
            await interaction.followup.send(content=f"❌ {HISTORY_ERROR_MESSAGE}", ephemeral=True)
            return

        await interaction.followup.send(embed=create_shuffle_embed(result))

    @app_commands.command(name="skill", description="Show a player's Marine and Alien adjusted skill")
    @app_commands.describe(
        ns2id="NS2 id of the player",
        hiveskill="Current hive skill of the player",
    )
    async def skill(self, interaction: discord.Interaction, ns2id: int, hiveskill: int):
        """Look up one player's faction-adjusted skill."""
        await interaction.response.defer(ephemeral=True)
        try:
            player_skill = await asyncio.to_thread(
                self.shuffle_service.get_player_skill, ns2id, hiveskill
            )
        except HistoryUnavailableError as e:
            logger.error(f"Skill lookup failed: {e}")
            await interaction.followup.send(content=f"❌ {HISTORY_ERROR_MESSAGE}", ephemeral=True)
            return

        await interaction.followup.send(embed=create_player_skill_embed(player_skill), ephemeral=True)


async def setup(bot: commands.Bot):
    """Setup function called when loading the cog."""
    shuffle_service = getattr(bot, "shuffle_service", None)
    if not shuffle_service:
        logger.warning("ShuffleCommands: shuffle_service not found on bot, skipping cog load")
        return

    await bot.add_cog(ShuffleCommands(bot, shuffle_service))
