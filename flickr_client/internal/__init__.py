"""Внутренние модули клиента"""
