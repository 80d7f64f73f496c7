# -*- coding: utf-8 -*-
"""
gql_sdl package information
"""

__title__ = "gql_sdl"
__description__ = "GraphQL SDL parsing and schema directive validation."
__url__ = "https://github.com/lirsacc/gql-sdl"
__version__ = "0.1.0"
__author__ = "Charles Lirsac"
__author_email__ = "charles@lirsac.me"
__license__ = "MIT"
__copyright__ = "Copyright 2019 Charles Lirsac"
