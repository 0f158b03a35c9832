# Services package init
"""
IdeaBoard Backend: Services Layer
===================================

What:  Business logic between routes (HTTP) and repositories (SQL).
How:   Services are stateless singletons. Each call receives the request's
       AsyncSession, builds the repositories it needs, and returns schema
       objects ready for serialization.

Service Inventory:
    - IdeaService: list / find / create / delete ideas, compose_with_likes
    - LikeService: list / create / delete likes of one idea
"""
