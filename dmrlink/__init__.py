"""Building blocks for DMR network gateways: frame constants, sync patterns, timers, SHA-256, ring buffers, worker threads and UDP sockets."""

__version__ = "20260214"