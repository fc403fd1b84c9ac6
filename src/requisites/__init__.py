"""Requisite validation.

Requisites are the structured business and banking identifiers (INN, KPP, BIK, account number, KBK,
OKTMO) extracted from documents. Validation is pure and reports failures as result values.
"""
