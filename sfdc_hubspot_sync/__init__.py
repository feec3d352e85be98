"""
Sincronización one-way: Salesforce -> HubSpot.

Cada trigger de Salesforce (Contact, Account, Lead) se procesa de forma
aislada y secuencial:
- Se enruta por su campo `type`.
- Se mapean los fields de Salesforce a propiedades de HubSpot.
- Se acumula el ID de Salesforce en una propiedad "ledger" (IDs separados por ';').

No hay estado local: todo lo previo se consulta en HubSpot en cada corrida.
"""

__version__ = "1.0.0"
