"""
Regex patterns for the renamer subsection.
File: attachment_renamer/renamer/renamer_regex_patterns.py
"""

import re

# Template tokens: {{DATE:FMT}}, {{frontmatter:key}} and {{name}}
TEMPLATE_TOKEN_RGX = re.compile(r'\{\{([^{}]*)\}\}')
DATE_DIRECTIVE_PREFIX = 'DATE:'
FRONTMATTER_DIRECTIVE_PREFIX = 'frontmatter:'

# Moment.js style date tokens, longest alternatives first.
# Bracketed text is copied through literally.
DATE_FORMAT_TOKEN_RGX = re.compile(
    r'\[[^\]]*\]'
    r'|YYYY|YY|Q'
    r'|MMMM|MMM|MM|Mo|M'
    r'|DDDD|DDD|DD|Do|D'
    r'|dddd|ddd|dd|d|E'
    r'|GGGG|WW|W'
    r'|HH|H|hh|h|kk|k'
    r'|mm|m|ss|s|SSS|SS|S'
    r'|A|a|X|x|ZZ|Z'
)

# Filename sanitization patterns (letters of any script are kept)
FILENAME_NOT_ALLOWED_RGX = re.compile(r"[^\w~`!@$&*()\-=+{};'\",<.>? ]")
FS_FILENAME_NOT_ALLOWED_RGX = re.compile(r"[^\w~`!@$&*()\-=+{};'\",<.>? :/]")

# Characters JavaScript encodeURI leaves untouched
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"

# Extensions picked up by the instant batch rename
BATCH_IMAGE_EXT_RGX = re.compile(r'jpe?g|png|gif|tiff|webp', re.IGNORECASE)

# Markdown document structure
FRONTMATTER_BLOCK_RGX = re.compile(r'\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*$', re.MULTILINE | re.DOTALL)
ATX_HEADING_RGX = re.compile(r'^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$', re.MULTILINE)
WIKILINK_EMBED_RGX = re.compile(r'!\[\[([^\]|#^]+)(?:[#^][^\]|]*)?(?:\|([^\]]*))?\]\]')
MARKDOWN_EMBED_RGX = re.compile(r'!\[([^\]]*)\]\(\s*(<[^>]+>|[^)\s]+)(?:\s+"[^"]*")?\s*\)')

# End of file #
