# petclinic/business_logic/__init__.py
