"""
Shared constants for profile image uploads.
"""

ALLOWED_IMAGE_MIME = frozenset({"image/jpeg", "image/png", "image/gif"})

# Multipart field names on POST /user/uploadImage
IMAGE_FORM_FIELD = "image"
EMAIL_FORM_FIELD = "email"

UPLOAD_CHUNK_SIZE = 1024 * 1024
