"""Building blocks for a Minecraft-protocol game server: buffers, chat, encryption, tasks and world storage."""

__version__ = "0.1.0"