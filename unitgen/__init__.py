"""unitgen - Generate, install and enable systemd unit files."""

__version__ = "1.0.0"
