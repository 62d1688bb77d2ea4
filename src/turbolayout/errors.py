"""Errors raised while composing a content page with its decorator."""


class LayoutError(ValueError):
    """Base class for template authoring mistakes that abort a render."""

    def __init__(self, message, *, template_name=None):
        super().__init__(message)
        self.template_name = template_name


class DecoratorPlacementError(LayoutError):
    """The decoration attribute was found on an element that is not the document root."""

    def __init__(self, attribute_name, *, template_name=None):
        self.attribute_name = attribute_name
        super().__init__(
            f"{attribute_name} attribute must appear in the root element of your content page",
            template_name=template_name,
        )


class DecoratorShapeError(LayoutError):
    """The resolved decorator page has no <html> root element."""

    def __init__(self, template_name):
        super().__init__(
            f"Decorator page {template_name} must have an <html> root element",
            template_name=template_name,
        )


class TemplateNotFoundError(LayoutError):
    def __init__(self, template_name):
        super().__init__(f"Template {template_name!r} could not be resolved", template_name=template_name)


class MissingDecoratorAttributeError(LayoutError):
    """decorate() was handed an element without the decoration attribute."""

    def __init__(self, attribute_name):
        self.attribute_name = attribute_name
        super().__init__(f"Element has no {attribute_name} attribute to decorate with")
