"""
Initial hostel menu
Path: hostel_api/scripts/menu_data.py
"""

MENU_ITEMS = [
    # MAIN DISHES
    {
        "code": "M1", "category": "main", "price": 120,
        "name": "CHICKEN & PORK SHASHLIK (2 PCS)",
        "description": "TANDOORI CHICKEN AND PORK ON A BED OF INDIAN SPICED ONION, GREEN AND RED PEPPER.",
        "img": "/img/chicken-pork-shashlik-2pcs.webp",
    },
    {
        "code": "M2", "category": "main", "price": 130,
        "name": "HAINANESE PORK CHOP",
        "description": "SINGAPOREAN PORK CHOPS COATED IN CREAM CRACKERS, TOPPED WITH A SAVOURY SAUCE, POTATOES, PEAS, ONIONS AND CARROTS.",
        "img": "/img/hainanese-pork-chop.webp",
    },
    {
        "code": "M3", "category": "main", "price": 140,
        "name": "CREAMY TUSCAN CHICKEN",
        "description": "TENDER CHICKEN BREASTS, SUN-DRIED TOMATOES, SPINACH AND GARLIC IN A PARMESAN CREAM SAUCE.",
        "img": "/img/creamy-tuscan-chicken.webp",
    },
    {
        "code": "M4", "category": "main", "price": 160,
        "name": "BIBIMBAP",
        "description": "KOREAN RICE BOWL TOPPED WITH NAMUL, GOCHUJANG, EGG AND SLICED MEAT.",
        "img": "/img/bibimbap.webp",
    },

    # SNACKS
    {
        "code": "S1", "category": "snacks", "price": 35,
        "name": "UBE MALAGKIT TURON WITH CHEESE (3PCS)",
        "description": "UBE MALAGKIT AND CHEDDAR CHEESE WRAPPED LIKE A SPRING ROLL AND FRIED UNTIL CRISPY.",
        "img": "/img/ube-malagkit-turon-cheese-3pcs.webp",
    },
    {
        "code": "S2", "category": "snacks", "price": 45,
        "name": "PINSEC FRITO (4 PCS)",
        "description": "FRIED PORK DUMPLINGS WITH A CRISPY GOLDEN WRAPPER.",
        "img": "/img/pinsec-frito-4pcs.webp",
    },
    {
        "code": "S3", "category": "snacks", "price": 60,
        "name": "TSUKUNE (4 PCS)",
        "description": "FRIED JAPANESE PORK MEATBALLS GLAZED IN A SWEET SAVORY SAUCE.",
        "img": "/img/tsukune-4pcs.webp",
    },
    {
        "code": "S4", "category": "snacks", "price": 80,
        "name": "CHEESY TAKOYAKI PIZZA (3 PCS) BITE SIZE",
        "description": "AIR FRIED BATTER FILLED WITH MOZZARELLA, DICED SHRIMP AND GREEN ONION, DRIZZLED WITH JAPANESE MAYONNAISE.",
        "img": "/img/cheesy-takoyaki-pizza-3pcs-bitesize.webp",
    },
    {
        "code": "S5", "category": "snacks", "price": 80,
        "name": "MOZZARELLA STICK (4PCS)",
        "description": "BREADED MOZZARELLA STICKS FRIED UNTIL GOLDEN.",
        "img": "/img/mozzarella-stick-4pcs.webp",
    },

    # DESSERTS
    {
        "code": "D1", "category": "desserts", "price": 50,
        "name": "MINI BLAZED DONUTS (4 PCS)",
        "description": "BAKED MINI DONUTS COATED IN CINNAMON AND SUGAR.",
        "img": "/img/mini-blazed-donuts-4pcs.webp",
    },
    {
        "code": "D2", "category": "desserts", "price": 55,
        "name": "CHE CHUOI",
        "description": "VIETNAMESE BANANA PUDDING WITH RICH COCONUT CREAM.",
        "img": "/img/che-chuoi.webp",
    },
    {
        "code": "D3", "category": "desserts", "price": 65,
        "name": "MANGO STICKY RICE",
        "description": "THAI STICKY WHITE RICE WITH SWEET COCONUT SAUCE AND FRESH MANGO.",
        "img": "/img/mango-sticky-rice.webp",
    },

    # DRINKS
    {
        "code": "C1", "category": "drinks", "price": 65,
        "name": "ICE MATCHA CREAM",
        "description": "ICED MATCHA LATTE TOPPED WITH A THICK LAYER OF WHIPPED CREAM.",
        "img": "/img/ice-matcha-cream.webp",
    },
    {
        "code": "C2", "category": "drinks", "price": 70,
        "name": "ICE DOUBLE CHOCOLATE CREAM",
        "description": "DARK CHOCOLATE TOPPED WITH WHIPPED CREAM AND CHOCOLATE SYRUP.",
        "img": "/img/ice-double-chocolate-cream.webp",
    },
    {
        "code": "R1", "category": "drinks", "price": 30,
        "name": "FOUR SEASONS",
        "description": "REFRESHING FRUIT DRINK, A PERFECT PAIR FOR EVERY MEAL.",
        "img": "/img/four-seasons.webp",
    },
    {
        "code": "R2", "category": "drinks", "price": 30,
        "name": "LEMON ICE TEA",
        "description": "ICED TEA WITH SUGAR AND LEMON.",
        "img": "/img/lemon-ice-tea.webp",
    },
]
