"""
Roulette Cog
"""

import asyncio
import discord
from discord.ext import commands
import logging
from typing import Dict, Tuple

from roulette.models import Note, SpinResult
from roulette.spin_controller import SpinController
from roulette.wheel_renderer import WheelRenderer
from ui.spin_view import SpinView
from utils.embed_builder import EmbedBuilder
from utils.translations import SUPPORTED_LANGUAGES, Translations

logger = logging.getLogger(__name__)

GIF_FILENAME = 'note_wheel.gif'
IMAGE_FILENAME = 'note_wheel.png'


class RouletteCog(commands.Cog):
    def __init__(self, bot):
        self.bot = bot
        # one wheel per channel
        self.controllers: Dict[int, SpinController] = {}
        self.renderer = WheelRenderer(
            pointer_angle=bot.settings.pointer_angle,
            label_max_chars=bot.settings.label_max_chars
        )

    def get_controller(self, channel) -> SpinController:
        controller = self.controllers.get(channel.id)
        if controller is None:
            controller = SpinController(
                settings=self.bot.settings,
                notes=self.bot.notes,
                on_reveal=lambda result: self._announce_winner(channel, result)
            )
            self.controllers[channel.id] = controller
        return controller

    async def cog_unload(self):
        for controller in self.controllers.values():
            controller.close()
        logger.info(f"🛑 Closed {len(self.controllers)} wheels")
        self.controllers.clear()

    @commands.Cog.listener()
    async def on_notes_loaded(self, notes: Tuple[Note, ...]):
        for controller in self.controllers.values():
            controller.load_notes(notes)
        logger.info(f"📝 {len(notes)} notes handed to {len(self.controllers)} wheels")

    async def start_spin(self, channel, guild_id) -> bool:
        language = self.bot.get_language(guild_id)
        controller = self.get_controller(channel)

        if not controller.notes:
            await channel.send(embed=EmbedBuilder.create_loading_embed(language))
            return False

        # the reveal countdown starts once the animation is out, not while it renders
        result = controller.request_spin(arm_reveal=False)
        if result is None:
            return False

        layout = controller.layout
        try:
            loop = asyncio.get_running_loop()
            gif_buffer = await loop.run_in_executor(
                None,
                self.renderer.create_spin_gif,
                layout,
                result.start_rotation,
                result.cumulative_rotation,
                self.bot.settings.animation_ms,
                result.index
            )
            embed = EmbedBuilder.create_wheel_embed(controller.snapshot(), language, GIF_FILENAME)
            await channel.send(embed=embed, file=discord.File(gif_buffer, filename=GIF_FILENAME))
        except Exception as e:
            # the winner is already fixed, the reveal still goes out
            logger.error(f"Error sending spin animation: {e}")
        finally:
            controller.arm_reveal()

        return True

    async def _announce_winner(self, channel, result: SpinResult):
        language = self.bot.get_language(getattr(channel.guild, 'id', None))
        try:
            await channel.send(embed=EmbedBuilder.create_result_embed(result.note, language))
        except discord.HTTPException as e:
            logger.error(f"Error announcing winner: {e}")

    @commands.command(name='spin')
    async def spin(self, ctx):
        await self.start_spin(ctx.channel, ctx.guild.id if ctx.guild else None)

    @commands.command(name='wheel')
    async def wheel(self, ctx):
        guild_id = ctx.guild.id if ctx.guild else None
        language = self.bot.get_language(guild_id)
        controller = self.get_controller(ctx.channel)
        snapshot = controller.snapshot()

        if not snapshot.has_notes:
            await ctx.send(embed=EmbedBuilder.create_loading_embed(language))
            return

        try:
            image = self.renderer.create_wheel_image(snapshot.layout, snapshot.cumulative_rotation)
            embed = EmbedBuilder.create_wheel_embed(snapshot, language, IMAGE_FILENAME)
            await ctx.send(embed=embed, file=discord.File(image, filename=IMAGE_FILENAME),
                           view=SpinView(self, language))
        except Exception as e:
            await ctx.send(f"❌ Error: {e}")
            logger.error(f"Error sending wheel: {e}")

    @commands.command(name='notes')
    async def notes(self, ctx):
        language = self.bot.get_language(ctx.guild.id if ctx.guild else None)
        count = await self.bot.reload_notes()

        if count:
            await ctx.send(Translations.text(language, 'notes_reloaded', count=count))
        else:
            await ctx.send(f"❌ {Translations.text(language, 'notes_unavailable')}")

        await ctx.send(embed=EmbedBuilder.create_note_list_embed(
            self.bot.notes, language, self.bot.settings.label_max_chars
        ))

    @commands.command(name='language')
    async def language(self, ctx, code: str = None):
        guild_id = ctx.guild.id if ctx.guild else None
        if code is None or code.lower() not in SUPPORTED_LANGUAGES:
            current = self.bot.get_language(guild_id)
            options = ", ".join(
                f"`{lang}` ({Translations.language_name(lang, current)})" for lang in SUPPORTED_LANGUAGES
            )
            await ctx.send(f"🌐 {options}")
            return

        language = self.bot.set_language(guild_id, code)
        await ctx.send(f"🌐 {Translations.text(language, 'language_set')}")


async def setup(bot):
    await bot.add_cog(RouletteCog(bot))
