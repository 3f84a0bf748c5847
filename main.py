"""
Entry point for the NS2 balanced shuffle service.

Serves the HTTP API with uvicorn and, when DISCORD_BOT_TOKEN is set, runs the
Discord bot on the same event loop.
"""

import asyncio
import logging

# Configure logging BEFORE importing discord to prevent duplicate handlers
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Override any existing handlers (e.g., from discord.py)
)
logger = logging.getLogger("ns2_shuffle")


class _PyNaClFilter(logging.Filter):
    """Filter out the PyNaCl warning from discord.py; voice is never used."""

    def filter(self, record):
        return "PyNaCl is not installed" not in record.getMessage()


logging.getLogger("discord.client").addFilter(_PyNaClFilter())

import discord
import uvicorn
from discord.ext import commands

# discord.py adds its own handler to the 'discord' logger on import
_discord_logger = logging.getLogger("discord")
_discord_logger.handlers.clear()
_discord_logger.setLevel(logging.INFO)

from api.app import create_app
from config import DISCORD_BOT_TOKEN, HTTP_HOST, HTTP_PORT
from infrastructure.service_container import ServiceContainer

EXTENSIONS = [
    "commands.shuffle",
]


def create_bot(container: ServiceContainer) -> commands.Bot:
    """Build the Discord bot with services exposed for the cogs."""
    intents = discord.Intents.default()
    bot = commands.Bot(command_prefix="!", intents=intents)
    container.expose_to_bot(bot)

    @bot.event
    async def setup_hook():
        """Load command cogs."""
        for ext in EXTENSIONS:
            try:
                await bot.load_extension(ext)
                logger.info(f"Loaded extension: {ext}")
            except Exception as exc:
                logger.error(f"Failed to load extension {ext}: {exc}", exc_info=True)

    @bot.event
    async def on_ready():
        logger.info(f"{bot.user} connected. Guilds: {len(bot.guilds)}")
        try:
            await bot.tree.sync()
            logger.info("Slash commands synced globally.")
        except Exception as exc:
            logger.error(f"Failed to sync commands: {exc}", exc_info=True)

    return bot


async def serve(container: ServiceContainer) -> None:
    """Run the HTTP server, plus the Discord bot when a token is configured."""
    app = create_app(container.shuffle_service)
    server = uvicorn.Server(uvicorn.Config(app, host=HTTP_HOST, port=HTTP_PORT, log_config=None))

    tasks = [server.serve()]
    if DISCORD_BOT_TOKEN:
        bot = create_bot(container)
        tasks.append(bot.start(DISCORD_BOT_TOKEN))
    else:
        logger.info("DISCORD_BOT_TOKEN not set; running HTTP API only")

    logger.info(f"Listening on {HTTP_HOST}:{HTTP_PORT}")
    await asyncio.gather(*tasks)


def main():
    """Run the service."""
    container = ServiceContainer()
    container.initialize()
    try:
        asyncio.run(serve(container))
    except KeyboardInterrupt:
        logger.info("Stopped by user (Ctrl+C)")


if __name__ == "__main__":
    main()
