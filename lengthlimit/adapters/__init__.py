"""Byte source and sink adapters.

The limited reader and writer depend only on the small protocols in
``source.base`` and ``sink.base``; the concrete classes here cover in-memory
data and async chunk iterators such as ``Request.stream()``.
"""
