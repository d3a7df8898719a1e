# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Data model shared by the allocator, the emitters and the boundary layers.
"""
