"""
Build metadata, rewritten by the release build.

DO NOT EDIT
"""

BUILD_VERSION = "undefined"
