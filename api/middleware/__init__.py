"""API Middleware"""
