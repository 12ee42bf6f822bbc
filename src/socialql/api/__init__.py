"""
HTTP application for SocialQL
"""
