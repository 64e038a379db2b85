import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
STOCK_REPORT_FILENAME_BASE = os.getenv("STOCK_REPORT_FILENAME", "stock_report")
ORDER_FILENAME_PREFIX = os.getenv("ORDER_FILENAME_PREFIX", "Pedido_Barra_")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- Logging ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_FILENAME = os.getenv("LOG_FILENAME", "barstock.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Generative Text Assistant ---
# API_KEY is accepted as a fallback name.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models"
)
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

# --- Messaging / Sharing ---
WHATSAPP_BASE_URL = os.getenv("WHATSAPP_BASE_URL", "https://wa.me")
ORDER_WEBHOOK_URL = os.getenv("ORDER_WEBHOOK_URL")

# --- Shared Business Logic ---
# Fill percentage at or below which a non-critical product is flagged LOW.
LOW_STOCK_PERCENT = float(os.getenv("LOW_STOCK_PERCENT", "40"))

# Pseudo-supplier: whole catalog, exported as a document instead of messaged.
GENERAL_ORDER_ID = "general"

# --- Order Document ---
DOCUMENT_TITLE = os.getenv("DOCUMENT_TITLE", "Haz Tu Stock")
DOCUMENT_SUBTITLE = "Gestión de Barra & Pedidos"
DOCUMENT_HEADING = "Lista de Pedido General"
DOCUMENT_FOOTER = "Generado con Haz Tu Stock App - Bar Management"
DOCUMENT_COLUMNS = ["PRODUCTO", "CANTIDAD", "UNIDAD"]
