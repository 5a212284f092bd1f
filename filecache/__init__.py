"""
OneDrive file listing served through a Firestore cache
"""
