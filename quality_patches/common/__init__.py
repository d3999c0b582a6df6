"""Shared context, configuration and console helpers"""
