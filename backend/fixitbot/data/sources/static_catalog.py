"""Hand-curated DIY guides and partner workshops (Guadalajara area)."""
from fixitbot.domain.entities.catalog_entity import GuideCard, Workshop


GUIDES = (
    GuideCard(
        id="rayon-ligero",
        title="Eliminar rayón ligero con pulido",
        difficulty="Fácil",
        time="20–30 min",
        video_id="dQw4w9WgXcQ",
        steps=(
            "Lavar área con agua y jabón neutro",
            "Aplicar compuesto pulidor con pad de espuma",
            "Pulir en movimientos circulares sin presionar de más",
            "Retirar exceso y revisar a contraluz",
        ),
        tags=("pintura", "pulido", "rayón"),
    ),
    GuideCard(
        id="raspon-parachoques",
        title="Raspones en defensa (retoque rápido)",
        difficulty="Media",
        time="35–50 min",
        video_id="M3r2XDceM6A",
        steps=(
            "Desengrasar con alcohol isopropílico",
            "Lijar suave (grano 2000) en húmedo",
            "Aplicar pintura de retoque del color",
            "Sellar con barniz en pluma y pulir",
        ),
        tags=("parachoques", "barniz", "retoque"),
    ),
    GuideCard(
        id="abolladura-pequena",
        title="Abolladura pequeña sin pintura (PDR casero)",
        difficulty="Media",
        time="25–40 min",
        video_id="kXYiU_JCYtU",
        steps=(
            "Calentar suavemente el área (secadora de pelo)",
            "Usar ventosa/plunger para traccionar",
            "Golpecitos por perímetro con martillo de goma",
            "Revisar reflejos hasta nivelar",
        ),
        tags=("PDR", "abolladura", "carrocería"),
    ),
    GuideCard(
        id="piedritas-cofre",
        title="Piedritas en cofre (retoque puntual)",
        difficulty="Fácil",
        time="15–25 min",
        video_id="eVTXPUF4Oz4",
        steps=(
            "Limpiar con desengrasante",
            "Aplicar primer en microgota",
            "Pintura base con palillo",
            "Sellar con gota de barniz UV",
        ),
        tags=("cofre", "retoque", "primer"),
    ),
    GuideCard(
        id="plastico-negro",
        title="Restaurar plásticos negros exteriores",
        difficulty="Fácil",
        time="10–20 min",
        video_id="ktvTqknDobU",
        steps=(
            "Limpieza profunda con APC",
            "Aplicar restaurador en capa fina",
            "Dejar curar 10–15 min",
            "Repetir si es necesario",
        ),
        tags=("detailing", "plástico", "exteriores"),
    ),
    GuideCard(
        id="mancha-resina",
        title="Quitar resina/contaminación sin dañar pintura",
        difficulty="Media",
        time="20–30 min",
        video_id="YQHsXMglC9A",
        steps=(
            "Aplicar descontaminante (tar/bug) localmente",
            "Esperar el tiempo indicado",
            "Retirar con microfibra limpia",
            "Proteger con sellador",
        ),
        tags=("resina", "contaminación", "detailing"),
    ),
)

WORKSHOPS = (
    Workshop(
        id="t1",
        name="Carrocerías Patria",
        address="Av. Patria 123, GDL",
        phone="+523311112233",
        whatsapp="523311112233",
        lat=20.6736,
        lng=-103.344,
        services=("pintura", "hojalatería", "pulido"),
        hours="L–S 9:00–19:00",
    ),
    Workshop(
        id="t2",
        name="Detail Pro Circunvalación",
        address="Circunvalación 456, GDL",
        phone="+523312224455",
        whatsapp="523312224455",
        services=("detailing", "plásticos", "pulido"),
        hours="L–V 10:00–18:00",
    ),
    Workshop(
        id="t3",
        name="Hojalatería & Pintura Centro",
        address="5 de Mayo 789, Centro",
        phone="+523317778899",
        services=("pintura", "abolladuras", "PDR"),
        hours="L–S 9:30–18:30",
    ),
)
