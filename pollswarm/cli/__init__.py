"""Subcommands for the pollswarm CLI"""
