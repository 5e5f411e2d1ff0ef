"""
API layer for the User Accounts Service.

Exposes the JSON and multipart endpoints under /user (create, edit, delete,
getAll, uploadImage).
"""
