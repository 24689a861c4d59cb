import logging
import discord
from discord.ext import commands
from dotenv import load_dotenv
from config.settings import Settings
from ledgerbank import create_bank

extensions = (
    "cogs.bankcmd",
    )


def setup_logging(settings):
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    for name in ('discord', 'ledgerbank', 'cogs'):
        logger = logging.getLogger(name)
        logger.setLevel(settings.log_level)
        logger.addHandler(handler)


class BankBot(commands.Bot):
    def __init__(self, *args, **kwargs):
        self.settings = kwargs.pop('settings')
        super().__init__(*args, **kwargs)
        self.bank, self.manager = create_bank()
        # Discord user id -> Account handle
        self.handles = {}

    async def setup_hook(self):
        for extension in extensions:
            await self.load_extension(extension)


def main():
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    intents = discord.Intents.default()
    intents.message_content = True
    intents.members = True

    bot = BankBot(
        command_prefix=settings.command_prefix,
        owner_id=settings.owner_id,
        intents=intents,
        settings=settings,
    )
    bot.run(settings.discord_token, log_handler=None)


if __name__ == '__main__':
    main()
