import os
import re

ALLOWED_EXTENSIONS=(".md", ".txt")
#Also the URL pattern for document routes
DOCUMENT_NAME_PATTERN=r"\w+\.\w+"

#Config parser helper functions
def check_if_exists(parserobj, section, item):
    return section in parserobj and item in parserobj[section]

def read_if_exists(parserobj, section, item, default_value=None):
    if check_if_exists(parserobj, section, item):
        return parserobj[section][item]
    else:
        return default_value

#Validation helpers
#Both raise ValueError with the message to show the user
def any_fields_empty(*fields):
    return any(len(field)==0 for field in fields)

def fields_include_spaces(*fields):
    return any(" " in field for field in fields)

def validate_document_name(name, existing):
    extension=os.path.splitext(name)[1]
    if len(name)==0:
        raise ValueError("A name is required")
    if fields_include_spaces(name):
        raise ValueError("File name cannot include spaces")
    if not extension:
        raise ValueError("File name must have an extension")
    if name in existing:
        raise ValueError("File names must be unique")
    if extension not in ALLOWED_EXTENSIONS:
        raise ValueError("That file type is not supported")
    if not re.fullmatch(DOCUMENT_NAME_PATTERN, name):
        raise ValueError("File name may only contain letters, digits and underscores")

def validate_signup(username, password, confirmation, existing):
    if any_fields_empty(username, password, confirmation):
        raise ValueError("No field can be empty")
    if password!=confirmation:
        raise ValueError("Passwords did not match")
    if fields_include_spaces(username, password):
        raise ValueError("Username/password cannot include spaces")
    if username in existing:
        raise ValueError("Username must be unique")
