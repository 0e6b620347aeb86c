"""
The grammar shared by all BagIt tag files (bagit.txt, bag-info.txt, and
package-info.txt):  each line is a "key: value" pair, and a line that starts
with whitespace continues the value of the pair before it.
"""
from ..access.bagit import read_text_lines
from ..access.exceptions import InvalidTagFormat
from ..constants import TAG_SEPARATOR

def parse_tag_lines(lines, separator=TAG_SEPARATOR, source=None, logger=None):
    """
    parse the lines of a tag file into a list of (key, value) tuples, in the
    order they appear.  Keys may repeat.  A continuation line is stripped and
    appended to the value before it, joined with a newline.  Empty lines are
    skipped.

    :param lines:          the lines of the file, without line terminators
    :param str separator:  the token separating keys from values
    :param str source:     the name of the file being parsed (for messages)
    :param Logger logger:  a logger instance to send messages to.
    :raises InvalidTagFormat:  if a line is not a key-value pair or if the
                           first pair-bearing line is a continuation
    """
    pairs = []
    for line in lines:
        if not line:
            continue

        if line[0].isspace():
            if not pairs:
                raise InvalidTagFormat("Continuation line [{0}] does not follow "
                                       "a key-value pair".format(line), source)
            key, value = pairs.pop()
            pairs.append((key, value + "\n" + line.strip()))
            if logger:
                logger.debug("Found an indented line - merging it with key [%s]",
                             key)
            continue

        parts = line.split(separator, 1)
        if len(parts) != 2:
            raise InvalidTagFormat(
                ("Line [{0}] does not meet the BagIt specification for a tag "
                 "file.  It must follow the form of <key>{1}<value> or, if "
                 "continuing from another line, must be indented by a space or "
                 "a tab.").format(line, separator), source)

        pairs.append((parts[0].strip(), parts[1].strip()))
        if logger:
            logger.debug("Found key [%s] value [%s] in %s", pairs[-1][0],
                         pairs[-1][1], source)

    return pairs

def read_tag_file(path, encoding='utf-8', separator=TAG_SEPARATOR, logger=None):
    """
    read and parse the tag file at the given path.

    :param Path path:      the location of the tag file
    :param str encoding:   the character encoding of the file
    :return: a list of (key, value) tuples
    """
    lines = read_text_lines(path, encoding, logger)
    return parse_tag_lines(lines, separator, str(path), logger)
