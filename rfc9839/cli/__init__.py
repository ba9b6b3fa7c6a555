# CLI package for the RFC 9839 classifier
"""
Command line interface for classifying code points.

Commands:
    rfc9839 check    — Category membership for one or more code points
    rfc9839 explain  — Elementary predicates and rejection reasons
    rfc9839 ranges   — Accepted ranges of a category
"""
