"""Linkerd command line interface"""
