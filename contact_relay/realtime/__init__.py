"""Realtime infrastructure (Socket.IO and raw WebSocket).

Both transports drive the same :class:`~contact_relay.realtime.session.RealtimeSession`
so acknowledgement behaviour does not depend on how the client connected.
"""
