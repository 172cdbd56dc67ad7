"""
Keyword-based topic tagging for contact messages.

Tags are computed once when a submission is created and never recomputed.
"""

# (label, keywords) in the order labels are reported
TAG_KEYWORDS = [
    ('AI/ML', ('ai', 'machine learning', 'ml')),
    ('Cloud', ('cloud', 'aws', 'azure')),
    ('Data Science', ('data', 'analytics', 'science')),
    ('Security', ('security', 'compliance')),
    ('Mobile', ('mobile', 'app')),
    ('Web Development', ('web', 'website', 'frontend')),
]


def classify(message):
    """
    Return the topic labels whose keywords occur in ``message``.

    Matching is a case-insensitive substring test, so "email" counts as
    "ai" and "apply" counts as "app". Each label is independent.
    """
    text = (message or '').lower()
    return [
        label for label, keywords in TAG_KEYWORDS
        if any(keyword in text for keyword in keywords)
    ]
