"""Core text processing for the translation proxy"""
