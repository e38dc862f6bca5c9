"""
Fixed markup shared by every generated application document.
"""

PDF_HEADER = (
    '<div class="document-header">'
    '<span class="document-header__title">Application Summary</span>'
    '</div>'
)

# CSS class of the wrapper injected around the header markup
HEADER_ELEMENT_CLASS = 'pdf-running-header'
