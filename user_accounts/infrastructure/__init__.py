"""
Infrastructure adapters: MongoDB persistence and the security capabilities
(bcrypt hashing, JWT access tokens, ObjectId generation).
"""
