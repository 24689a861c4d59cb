"""Configuration management for the bank bot."""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the bank bot.

    The bank itself takes no configuration; these values only drive the
    Discord front end and its logging.
    """

    # Discord Configuration (required)
    discord_token: str

    # Bot Configuration
    command_prefix: str = '$'
    owner_id: int = 356096513828454411
    admin_role_name: str = '管理员'

    # Logging Configuration
    log_file: str = 'discord.log'
    log_level: str = 'DEBUG'

    # Admin listing
    max_listed_accounts: int = 20

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If required environment variables are not set, or
                BANK_OWNER_ID is not an integer.
        """
        discord_token = os.getenv('DISCORD_TOKEN')

        if not discord_token:
            raise ValueError("DISCORD_TOKEN environment variable is required")

        overrides = {}
        if os.getenv('BANK_COMMAND_PREFIX'):
            overrides['command_prefix'] = os.getenv('BANK_COMMAND_PREFIX')
        if os.getenv('BANK_OWNER_ID'):
            try:
                overrides['owner_id'] = int(os.getenv('BANK_OWNER_ID'))
            except ValueError:
                raise ValueError("BANK_OWNER_ID must be an integer") from None
        if os.getenv('BANK_LOG_FILE'):
            overrides['log_file'] = os.getenv('BANK_LOG_FILE')
        if os.getenv('BANK_LOG_LEVEL'):
            overrides['log_level'] = os.getenv('BANK_LOG_LEVEL').upper()

        return cls(discord_token=discord_token, **overrides)
