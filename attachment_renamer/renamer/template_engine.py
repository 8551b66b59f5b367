"""
Template-based attachment naming with variable substitution.
File: attachment_renamer/renamer/template_engine.py

Handles name patterns like "{{imageNameKey}}-{{DATE:YYYYMMDD}}" where
variables come from the active note.
"""

from datetime import datetime
from typing import Any, Optional

from attachment_renamer.renamer.date_format import format_date
from attachment_renamer.renamer.renamer_regex_patterns import (
    TEMPLATE_TOKEN_RGX,
    DATE_DIRECTIVE_PREFIX,
    FRONTMATTER_DIRECTIVE_PREFIX,
)


def stringify_value(value: Any) -> str:
    """
    Turn a loosely-typed front-matter value into template text.

    None renders as "", lists are joined with "," and everything else
    goes through str().
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join(stringify_value(item) for item in value)
    return str(value)


class TemplateEngine:
    """
    Render attachment name patterns.

    Template Syntax:
    - Variables: {{variable_name}}
    - Dates: {{DATE:FORMAT}} with a Moment.js style format
    - Front-matter: {{frontmatter:key}}

    Examples (fileName = "My note", imageNameKey = "foo"):
    - "{{fileName}}" -> "My note"
    - "{{imageNameKey}}-{{DATE:YYYYMMDD}}" -> "foo-20220408"
    - "{{unknown}}x" -> "x"

    Rendering never raises. Unknown variables and directives become "".
    """

    def parse_template(self, template: str) -> list[str]:
        """
        List the token bodies found in a template, left to right.

        Args:
            template: Pattern like "{{fileName}}-{{DATE:YYYY}}"

        Returns:
            Token bodies, e.g. ["fileName", "DATE:YYYY"]
        """
        if not template:
            return []
        return [m.group(1) for m in TEMPLATE_TOKEN_RGX.finditer(template)]

    def get_required_variables(self, template: str) -> set[str]:
        """Plain variable names the template reads from the context."""
        return {
            token.strip() for token in self.parse_template(template)
            if not token.startswith((DATE_DIRECTIVE_PREFIX, FRONTMATTER_DIRECTIVE_PREFIX))
        }

    def render(self, template: str, context: dict[str, str],
               frontmatter: Optional[dict[str, Any]] = None,
               now: Optional[datetime] = None) -> str:
        """
        Substitute every token in the template.

        Args:
            template: Name pattern
            context: Variable values (fileName, dirName, dirPath, imageNameKey, firstHeading)
            frontmatter: Parsed front-matter of the active note, if any
            now: Instant used for every DATE directive (defaults to the current local time)

        Returns:
            Rendered stem; "" for an empty template
        """
        if not template:
            return ''

        moment = now if now is not None else datetime.now()
        context = context or {}
        frontmatter = frontmatter or {}

        def replace(match) -> str:
            token = match.group(1)

            if token.startswith(DATE_DIRECTIVE_PREFIX):
                return format_date(moment, token[len(DATE_DIRECTIVE_PREFIX):])

            if token.startswith(FRONTMATTER_DIRECTIVE_PREFIX):
                key = token[len(FRONTMATTER_DIRECTIVE_PREFIX):].strip()
                return stringify_value(frontmatter.get(key))

            return stringify_value(context.get(token.strip()))

        return TEMPLATE_TOKEN_RGX.sub(replace, template)

    def preview_substitution(self, template: str, context: dict[str, str],
                             frontmatter: Optional[dict[str, Any]] = None,
                             now: Optional[datetime] = None) -> dict:
        """
        Show what each token renders to, for --dry-run and debugging.

        Returns:
            Dictionary with the template, the rendered result and per-token values
        """
        moment = now if now is not None else datetime.now()
        substitutions = []

        for token in self.parse_template(template):
            substitutions.append({
                'token': token,
                'value': self.render('{{' + token + '}}', context, frontmatter, moment),
            })

        return {
            'template': template,
            'result': self.render(template, context, frontmatter, moment),
            'substitutions': substitutions,
        }


def render_template(template: str, context: dict[str, str],
                    frontmatter: Optional[dict[str, Any]] = None,
                    now: Optional[datetime] = None) -> str:
    """Render a name pattern with a throwaway TemplateEngine."""
    return TemplateEngine().render(template, context, frontmatter, now)


# End of file #
