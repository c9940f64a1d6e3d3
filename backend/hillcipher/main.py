from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse, StreamingResponse
from fastapi.middleware.cors import CORSMiddleware
from .hill_engine import HillCipher
from .hill_math import NoInverseExists, is_identity_mod
from .schemas import (
    KeyInput,
    EncryptionRequest,
    DecryptionRequest,
    EncryptionResult,
    DecryptionResult,
    MatrixDetails,
)
import pandas as pd
import io
import logging

# Configure logging
logger = logging.getLogger("uvicorn")

ALLOWED_ORIGINS = ["*"]

# Textbook keys for quick testing
PRESET_KEYS = {
    "2x2": [[3, 3], [2, 5]],
    "3x3": [[6, 24, 1], [13, 16, 10], [20, 17, 15]],
}

app = FastAPI(title="Hill Cipher")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"]
)

# --- Helper Functions ---

def _build_cipher(key):
    try:
        return HillCipher(key)
    except ValueError as e:
        logger.error(f"❌ Rejected key matrix: {e}")
        raise HTTPException(status_code=400, detail=str(e))

def _matrix_details(cipher: HillCipher, require_inverse: bool = True) -> MatrixDetails:
    try:
        inverse = cipher.inverse_key
    except NoInverseExists as e:
        if require_inverse:
            logger.error(f"❌ Key matrix not invertible: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        logger.info(f"⚠️ Singular key, no inverse to display: {e}")
        return MatrixDetails(determinant=cipher.determinant)
    return MatrixDetails(
        determinant=cipher.determinant,
        inverse=inverse,
        verified=is_identity_mod(inverse, cipher.key, cipher.modulus),
    )

@app.get("/")
def read_root():
    return RedirectResponse(url="/docs")

@app.get("/presets")
def get_presets():
    return PRESET_KEYS

@app.post("/encrypt", response_model=EncryptionResult)
def encrypt_text(req: EncryptionRequest):
    cipher = _build_cipher(req.key)
    logger.info(f"🔐 Encrypting with {cipher.size}x{cipher.size} key")
    ciphertext = cipher.encrypt(req.plaintext)
    # Encryption itself does not need the inverse
    details = _matrix_details(cipher, require_inverse=False)
    return {"ciphertext": ciphertext, "details": details}

@app.post("/decrypt", response_model=DecryptionResult)
def decrypt_text(req: DecryptionRequest):
    cipher = _build_cipher(req.key)
    logger.info(f"🔓 Decrypting with {cipher.size}x{cipher.size} key")
    details = _matrix_details(cipher)
    plaintext = cipher.decrypt(req.ciphertext)
    return {"plaintext": plaintext, "details": details}

@app.post("/matrix-details", response_model=MatrixDetails)
def get_matrix_details(req: KeyInput):
    cipher = _build_cipher(req.key)
    return _matrix_details(cipher)

@app.post("/export-excel")
def export_excel(req: KeyInput):
    cipher = _build_cipher(req.key)
    details = _matrix_details(cipher)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        pd.DataFrame(cipher.key).to_excel(writer, sheet_name='Key', header=False, index=False)
        pd.DataFrame(details.inverse).to_excel(writer, sheet_name='Inverse', header=False, index=False)
        df_summary = pd.DataFrame(
            [("Determinant (mod 26)", details.determinant), ("Verified", details.verified)],
            columns=['Metric', 'Value']
        )
        df_summary.to_excel(writer, sheet_name='Summary', index=False)

    output.seek(0)
    logger.info(f"📊 Exported {cipher.size}x{cipher.size} key details to Excel")

    headers = {
        'Content-Disposition': 'attachment; filename="hill_key_details.xlsx"'
    }
    return StreamingResponse(output, headers=headers, media_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
