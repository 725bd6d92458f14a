"""
Mailbox and delivery collaborators.
"""
