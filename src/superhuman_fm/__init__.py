"""Superhuman FM - A Slack app that sends on-demand channel podcasts.

Users pick the channels they want summarized from the app's Home tab and
request a podcast notification that is delivered to their DM with the app.

Components:
- main_socket: Socket Mode entry point
- handlers: Bolt listeners for Home tab, settings modal and podcast button
- session: per-event orchestration
- preselection: default channel selection for first-time users
- store: user preference storage (memory or SQLite)
- slack: Slack API integration, views and channel name resolution
- rendering: notification message composition
"""
