"""Cycle focus through the windows of the focused sway workspace"""
