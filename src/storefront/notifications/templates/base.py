"""Declarative email template: format strings filled from a context dict."""


class EmailTemplate:
    notification_type: str = ""
    subject: str = ""
    body: str = ""
    defaults: dict = {}

    @classmethod
    def render(cls, context: dict) -> dict:
        values = {**cls.defaults, **context}
        return {
            "subject": cls.subject.format(**values),
            "body": cls.body.format(**values),
        }
