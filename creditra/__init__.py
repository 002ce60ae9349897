"""
Creditra Backend - Credit Line Protocol Service

A FastAPI-based service that manages the lifecycle of credit lines,
exposes a placeholder wallet-risk evaluator, and follows contract
events emitted on the Stellar network.
"""

__version__ = "0.1.0"
