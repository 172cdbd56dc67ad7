"""
Contact Management App

Handles submissions from the marketing site's contact form:
- Public contact form submission with rate limiting
- Topic tagging of incoming messages
- Admin listing, search, update, response workflow and CSV export
- Email notifications (operator alert and submitter confirmation)
"""
