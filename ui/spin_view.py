"""
Spin View - "tap wheel to spin"
"""

import discord
import logging

from utils.translations import Translations

logger = logging.getLogger(__name__)


class SpinView(discord.ui.View):
    def __init__(self, cog, language: str):
        super().__init__(timeout=300)
        self.cog = cog
        self.language = language

        self.spin_button.label = f"🎡 {Translations.text(language, 'spin_button')}"

    @discord.ui.button(label='🎡 Spin', style=discord.ButtonStyle.primary, row=0)
    async def spin_button(self, interaction: discord.Interaction, button: discord.ui.Button):
        try:
            await interaction.response.defer()
        except discord.HTTPException as e:
            logger.error(f"Error deferring spin interaction: {e}")
            return

        # a press while spinning is simply ignored
        await self.cog.start_spin(interaction.channel, interaction.guild_id)
