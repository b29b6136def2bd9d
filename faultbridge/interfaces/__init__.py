"""
Interfaces layer package.

Contains FastAPI routers and Pydantic response schemas.
No reporting logic belongs here.
"""
