"""Last.fm web service infrastructure package.

This package provides the signed-request pipeline used by every Last.fm
API call: parameter signing, the HTTP boundary, response parsing, and the
request executor tying them together.
"""
