"""
Blog posts: create, update, list, fetch and delete, scoped to their author.
"""
