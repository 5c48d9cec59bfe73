import posixpath

DEFAULT_RESOURCE_TYPE = "image"

# Cloudinary resource type by file extension
RESOURCE_TYPES = {
    "txt": "raw",
    "htm": "raw",
    "html": "raw",
    "php": "raw",
    "css": "raw",
    "js": "raw",
    "json": "raw",
    "xml": "raw",
    "swf": "raw",
    "flv": "video",

    # images
    "png": "image",
    "jpe": "image",
    "jpeg": "image",
    "jpg": "image",
    "gif": "image",
    "bmp": "image",
    "ico": "image",
    "tiff": "image",
    "tif": "image",
    "svg": "image",
    "svgz": "image",

    # archives
    "zip": "raw",
    "rar": "raw",
    "exe": "raw",
    "msi": "raw",
    "cab": "raw",

    # audio and video
    "mp3": "video",
    "qt": "video",
    "mov": "video",
    "mp4": "video",

    # adobe
    "pdf": "raw",
    "psd": "image",
    "ai": "raw",
    "eps": "raw",
    "ps": "raw",

    # ms office
    "doc": "raw",
    "docx": "raw",
    "rtf": "raw",
    "xls": "raw",
    "xlsx": "raw",
    "ppt": "raw",
    "pptx": "raw",

    # open office
    "odt": "raw",
    "ods": "raw",
}


def _split_key(key: str):
    trimmed = key.rstrip("/") or key
    return posixpath.dirname(trimmed), posixpath.basename(trimmed)


def compute_path(key: str) -> str:
    """
    Maps a logical key to its Cloudinary public id by dropping the final extension.

    Only the last extension is removed, so "abcd.jpg.jpg" and "abcd.jpg.png"
    both map to "abcd.jpg".

    Args:
        key (str): The logical key, e.g. "a/b/file.jpg".

    Returns:
        str: The public id, e.g. "a/b/file".
    """
    dirname, basename = _split_key(key)
    filename = posixpath.splitext(basename)[0]
    if dirname in ("", "."):
        return filename
    return f"{dirname}/{filename}"


def compute_extension(key: str) -> str:
    """
    Returns the key's final extension without the dot, or "" when it has none.
    Dotfiles such as ".htaccess" count as names, not extensions.
    """
    _, basename = _split_key(key)
    return posixpath.splitext(basename)[1].lstrip(".")


def compute_resource_type(key: str) -> str:
    """
    Infers the Cloudinary resource type ('image', 'video' or 'raw') from the key's extension.
    Keys with no extension or an unknown one are treated as images.
    """
    return RESOURCE_TYPES.get(compute_extension(key).lower(), DEFAULT_RESOURCE_TYPE)
