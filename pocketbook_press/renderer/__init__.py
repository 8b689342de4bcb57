"""Paginated canvas, text measurement and PDF emission"""
