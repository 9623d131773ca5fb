"""Channel adapter registry: pluggable notification delivery channels.

Provides singleton access to channel adapters keyed by channel name.
New channels are added with register_channel(); the delivery coordinator
only ever asks this registry, so it never changes when a channel is added.
"""

from notifications.channel.port import ChannelPort, DeliveryChannel, UnknownChannelError

_channel_instances: dict[str, ChannelPort] = {}


def _build_default(channel_type: str) -> ChannelPort:
    if channel_type == DeliveryChannel.IN_APP.value:
        from notifications.channel.in_app import InAppChannel

        return InAppChannel()
    if channel_type == DeliveryChannel.DISCORD.value:
        from notifications.channel.discord import DiscordChannel

        return DiscordChannel()
    raise UnknownChannelError(channel_type)


def get_channel(channel_type: str) -> ChannelPort:
    """Return the adapter for ``channel_type`` (singleton per channel).

    Raises:
        UnknownChannelError: no adapter is registered or built in for the name.
    """
    if channel_type not in _channel_instances:
        _channel_instances[channel_type] = _build_default(channel_type)

    return _channel_instances[channel_type]


def register_channel(channel_type: str, adapter: ChannelPort) -> None:
    """Install (or replace) the adapter used for ``channel_type``."""
    _channel_instances[channel_type] = adapter


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
