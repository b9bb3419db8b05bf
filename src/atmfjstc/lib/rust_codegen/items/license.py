from dataclasses import dataclass, field
from enum import Enum
from typing import List

from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.comment import render_prefixed_lines


COPYRIGHT_PLACEHOLDER = '{}'

MIT_LICENSE_TEXT = """\
MIT License

{}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE."""

BSD_LICENSE_TEXT = ""


class LicenseType(Enum):
    """
    The license kinds for which a header can be generated. Each value is a (SPDX identifier, template text) pair.

    In the template text, a line consisting solely of ``{}`` marks where the copyright lines are inserted.
    """
    MIT = ('MIT', MIT_LICENSE_TEXT)
    BSD = ('BSD', BSD_LICENSE_TEXT)

    @property
    def spdx_id(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]


@dataclass(repr=False)
class License(Item):
    """
    A license header, rendered as a block of ``//`` comments ending in an SPDX identifier and a blank line.

    Notes:

    - The title line (and the empty comment line after it) are omitted if the title is empty
    - Each copyright entry becomes a ``Copyright (c) <entry>`` line, in the place of the template's placeholder line
    - A license kind with an empty template still produces the title and SPDX lines
    """
    title: str
    license_type: LicenseType
    copyrights: List[str] = field(default_factory=list)

    def add_copyright(self, copyright: str) -> 'License':
        self.copyrights.append(copyright)
        return self

    def render(self, fmt):
        if self.title != '':
            fmt.write_line(f"// {self.title}")
            fmt.write_line("//")

        for line in self.license_type.template.splitlines():
            if line == COPYRIGHT_PLACEHOLDER:
                for copyright in self.copyrights:
                    fmt.write_line(f"// Copyright (c) {copyright}")
            else:
                render_prefixed_lines(fmt, '//', [line])

        fmt.write_line("//")
        fmt.write_line(f"// SPDX-License-Identifier: {self.license_type.spdx_id}")
        fmt.write_line("//")
        fmt.write_line()
