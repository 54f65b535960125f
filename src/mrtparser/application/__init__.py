"""application/__init__.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""
