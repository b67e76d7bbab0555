"""User-facing guide to template syntax, served by the API."""

TUTORIAL = """\
Writing message templates

A template is ordinary text with placeholders in double curly braces.
Each placeholder is replaced with data when the message is produced.

1. Inserting a value

   Data:      {"name": "Alice", "city": "London"}
   Template:  Hello, {{name}}!
   Result:    Hello, Alice!

2. Reaching into nested data

   Use dots to go deeper, and numbers to pick list items.

   Data:      {"user": {"address": {"zipCode": "12345"}}, "items": ["apple", "pear"]}
   Template:  {{user.address.zipCode}} / {{items.0}}
   Result:    12345 / apple

   A key that does not exist is replaced with nothing.

3. Transformations

   default(key, 'text')
       Uses 'text' when the value is missing or empty (null).
       {{default(favoriteColor, 'unknown')}}

   date(key)
       Shows a date as month/day/year. Accepts timestamps in seconds or
       milliseconds and date strings such as 2023-03-15.
       {{date(createdAt)}}  ->  3/15/2023

   replace(key, ['find', 'replace with'], ...)
       Replaces text. Pairs are applied in order, each on the result of
       the one before.
       {{replace(status, ['_', ' '])}}

   Text arguments go in single quotes. If a transformation cannot be
   applied (an unknown name, or a value that is not a date) the
   placeholder shows #ERROR.

4. Things to watch for

   - Placeholders must be closed: "{{name" is left exactly as written.
   - Braces cannot appear inside a placeholder.
   - {{}} produces nothing.
"""
