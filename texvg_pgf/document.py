from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_DOCUMENT_CLASS = "standalone"
DEFAULT_PACKAGES = ("pgf",)
DEFAULT_GENERATOR = "texvg"


@dataclass(frozen=True)
class DocumentTemplate:
    """LaTeX shell wrapped around the picture in standalone-document mode."""

    document_class: str = DEFAULT_DOCUMENT_CLASS
    packages: tuple[str, ...] = DEFAULT_PACKAGES
    generator: str = DEFAULT_GENERATOR

    @classmethod
    def from_env(
        cls,
        *,
        document_class_env_var: str = "TEXVG_DOCUMENT_CLASS",
        packages_env_var: str = "TEXVG_PACKAGES",
        generator_env_var: str = "TEXVG_GENERATOR",
    ) -> "DocumentTemplate":
        document_class = os.getenv(document_class_env_var, "").strip() or DEFAULT_DOCUMENT_CLASS
        raw_packages = os.getenv(packages_env_var, "").strip()
        packages = tuple(p.strip() for p in raw_packages.split(",") if p.strip()) or DEFAULT_PACKAGES
        generator = os.getenv(generator_env_var, "").strip() or DEFAULT_GENERATOR
        return cls(document_class=document_class, packages=packages, generator=generator)

    def header(self) -> str:
        lines = [
            f"%%%%%% generated by {self.generator} %%%%%%",
            f"\\documentclass{{{self.document_class}}}",
        ]
        lines.extend(f"\\usepackage{{{pkg}}}" for pkg in self.packages)
        lines.append("\\begin{document}")
        return "\n".join(lines) + "\n"

    def footer(self) -> str:
        return "\\end{document}\n"

    def comment_block(self) -> list[str]:
        lines = [
            f"%% {self.generator} created for LaTeX/pgf",
            "%% you need to add:",
        ]
        lines.extend(f"%%   \\usepackage{{{pkg}}}" for pkg in self.packages)
        lines.append("%% to your LaTeX document")
        return lines
