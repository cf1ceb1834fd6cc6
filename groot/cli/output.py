"""CLI output utilities and formatting."""

from colorama import Fore, Style

# ASCII art banner for Groot CLI
BANNER = f"""
{Fore.GREEN}╔══════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                              {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}  __ _ _ __ ___   ___ | |_ {Style.RESET_ALL}                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT} / _` | '__/ _ \\ / _ \\| __|{Style.RESET_ALL}                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}| (_| | | | (_) | (_) | |_ {Style.RESET_ALL}                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT} \\__, |_|  \\___/ \\___/ \\__|{Style.RESET_ALL}                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT} |___/                     {Style.RESET_ALL}                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                              {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}A minimal local version control engine{Style.RESET_ALL}     {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                              {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}╚══════════════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"
